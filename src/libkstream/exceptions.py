# -*- coding: utf-8 -*-
from __future__ import annotations

__all__ = [
    'LibKStreamException',
    'KStreamIOError',
    'KeyFileError',
    'InputFileError',
    'OutputFileError'
]


class LibKStreamException(Exception):
    pass


class KStreamIOError(LibKStreamException):
    """读写密钥文件、输入文件或输出文件时发生的错误。

    属性 ``path`` 为出错的文件路径；如果操作的是文件对象，则为 ``None``。
    """

    def __init__(self, message: str, /, path=None) -> None:
        super().__init__(message)
        self.path = path


class KeyFileError(KStreamIOError):
    pass


class InputFileError(KStreamIOError):
    pass


class OutputFileError(KStreamIOError):
    pass
