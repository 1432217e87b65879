# -*- coding: utf-8 -*-
from __future__ import annotations

from .common import StreamCipherSkel
from .exceptions import (
    InputFileError,
    KStreamIOError,
    KeyFileError,
    LibKStreamException,
    OutputFileError
)
from .fileio import (
    read_inputfile,
    read_keyfile,
    write_display,
    write_outputfile
)
from .kstream import KStream, translate
from .miscutils import bytes2display
from .pkgver import (
    version,
    version_info
)
