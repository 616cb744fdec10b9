from .enums import StrEnum
from .file_utils import make_dirs, read_text_file, write_text_file
