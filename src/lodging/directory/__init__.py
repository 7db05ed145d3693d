from .applications.directory import Directory as Directory
from .applications.directory import DirectorySnapshot as DirectorySnapshot
