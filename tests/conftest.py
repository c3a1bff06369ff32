pytest_plugins = ["mp_masking.testing.fixtures"]
