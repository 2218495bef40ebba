from importlib.metadata import PackageNotFoundError, version

try:
    version = version("MSDio")
except PackageNotFoundError:
    version = "0.0.0"
