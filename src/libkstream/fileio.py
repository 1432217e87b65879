# -*- coding: utf-8 -*-
from __future__ import annotations

import os
import sys
from typing import IO, TextIO, Type

from .consts import KEY_SIZE
from .exceptions import InputFileError, KStreamIOError, KeyFileError, OutputFileError
from .miscutils import bytes2display
from .typedefs import BytesLike, FilePath
from .typeutils import is_filepath, tobytes, verify_fileobj

__all__ = [
    'read_keyfile',
    'read_inputfile',
    'write_outputfile',
    'write_display'
]


def _describe(filething) -> str:
    if is_filepath(filething):
        return f"'{os.fsdecode(filething)}'"
    return repr(filething)


def _read(filething: FilePath | IO[bytes],
          size: int,
          errcls: Type[KStreamIOError]
          ) -> bytes:
    if is_filepath(filething):
        try:
            with open(filething, mode='rb') as fileobj:
                return fileobj.read(size)
        except OSError as exc:
            raise errcls(f'cannot read {_describe(filething)}: {exc.strerror or exc}',
                         path=filething
                         ) from exc

    try:
        fileobj = verify_fileobj(filething, 'read')
        return fileobj.read(size)
    except (OSError, ValueError) as exc:
        raise errcls(f'cannot read {_describe(filething)}: {exc}') from exc


def read_keyfile(filething: FilePath | IO[bytes], /) -> bytes:
    """读取密钥文件 ``filething`` 的全部内容，并将其作为密钥返回。

    ``filething`` 可以是文件路径或以二进制模式打开的可读文件对象；
    如果是文件对象，会从其当前位置读取到末尾。

    文件内容必须恰好为 8 个字节。不满足条件，或文件无法读取时，触发 ``KeyFileError``。
    """
    # 多读一个字节，用于发现过长的密钥文件
    key = _read(filething, KEY_SIZE + 1, KeyFileError)
    if len(key) != KEY_SIZE:
        got = len(key) if len(key) < KEY_SIZE else f'more than {KEY_SIZE}'
        raise KeyFileError(f'key file {_describe(filething)} must contain exactly '
                           f'{KEY_SIZE} bytes, got {got}',
                           path=filething if is_filepath(filething) else None
                           )

    return key


def read_inputfile(filething: FilePath | IO[bytes], /) -> bytes:
    """读取输入文件 ``filething`` 的全部内容。文件无法读取时，触发 ``InputFileError``。"""
    return _read(filething, -1, InputFileError)


def write_outputfile(filething: FilePath | IO[bytes], data: BytesLike, /) -> int:
    """将 ``data`` 原样写入输出文件 ``filething``，返回写入的字节数。

    ``filething`` 为文件路径时，会创建或覆盖该文件。
    文件无法打开、写入失败或未能完整写入时，触发 ``OutputFileError``。
    """
    data = tobytes(data)

    if is_filepath(filething):
        try:
            with open(filething, mode='wb') as fileobj:
                nbytes = fileobj.write(data)
        except OSError as exc:
            raise OutputFileError(f'cannot write {_describe(filething)}: {exc.strerror or exc}',
                                  path=filething
                                  ) from exc
    else:
        try:
            fileobj = verify_fileobj(filething, 'write')
            nbytes = fileobj.write(data)
        except (OSError, ValueError) as exc:
            raise OutputFileError(f'cannot write {_describe(filething)}: {exc}') from exc

    if nbytes is not None and nbytes != len(data):
        raise OutputFileError(f'short write to {_describe(filething)}: '
                              f'{nbytes} of {len(data)} bytes written',
                              path=filething if is_filepath(filething) else None
                              )

    return len(data)


def write_display(data: BytesLike, textstream: TextIO | None = None, /) -> int:
    """将 ``data`` 经 ``miscutils.bytes2display()`` 转换后写入文本流 ``textstream``
    （默认为 ``sys.stdout``），返回写入的字符数。

    写入失败时（例如管道已关闭），触发 ``OutputFileError``。
    """
    if textstream is None:
        textstream = sys.stdout

    text = bytes2display(data)
    try:
        textstream.write(text)
        textstream.flush()
    except OSError as exc:
        raise OutputFileError(f'cannot write {_describe(textstream)}: {exc.strerror or exc}') from exc

    return len(text)
