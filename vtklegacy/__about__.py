from importlib import metadata

try:
    __version__ = metadata.version("vtklegacy")
except metadata.PackageNotFoundError:
    __version__ = "unknown"

__author__ = "vtklegacy developers"
__author_email__ = "vtklegacy@users.noreply.github.com"
__website__ = "https://github.com/vtklegacy/vtklegacy"
__license__ = "License :: OSI Approved :: MIT License"
__status__ = "Development Status :: 4 - Beta"
