from .diffing import DiffSegment, diff_chars, local_text, remote_text
from .normalize import normalize_text, read_source
