"""Testing support – hypothesis strategies and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_masking.testing.fixtures"]
"""
