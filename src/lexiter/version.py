from importlib.metadata import PackageNotFoundError, version

try:
    version = version("LexIter")
except PackageNotFoundError:
    version = "0.0.0"
