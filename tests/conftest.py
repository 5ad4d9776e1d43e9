pytest_plugins = ["pytester", "permitspec.pytest_plugin"]
