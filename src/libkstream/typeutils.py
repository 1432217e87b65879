# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import IO, Literal

from .typedefs import BytesLike, IntegerLike

__all__ = [
    'tobytes',
    'toint_nofloat',
    'is_filepath',
    'verify_fileobj'
]


def tobytes(byteslike: BytesLike) -> bytes:
    """尝试将 ``byteslike`` 转换为 ``bytes``。

    对 ``int`` 类型的对象不适用。如果输入这样的值，会触发 ``TypeError``。
    """
    if isinstance(byteslike, int):
        # 防止出现 bytes(1000) 这样的情况
        raise TypeError(f"a bytes-like object is required, not '{type(byteslike).__name__}'")
    elif isinstance(byteslike, bytes):
        return byteslike
    elif isinstance(byteslike, str):
        raise TypeError("a bytes-like object is required, not 'str'")
    else:
        return bytes(byteslike)


def toint_nofloat(integerlike: IntegerLike) -> int:
    """尝试将 ``integerlike`` 转换为 ``int``。

    对 ``float`` 类型的对象不适用。如果输入这样的值，会触发 ``TypeError``。
    """
    if isinstance(integerlike, float):
        raise TypeError(f"'{type(integerlike).__name__}' object cannot be interpreted as an integer")
    elif isinstance(integerlike, int):
        return integerlike
    else:
        return int(integerlike)


def is_filepath(obj) -> bool:
    """判断对象 ``obj`` 是否可以被视为文件路径。

    只有 ``str``、``bytes`` 类型，或者拥有 ``__fspath__``
    属性的对象，才会被视为文件路径。
    """
    return isinstance(obj, (str, bytes)) or hasattr(obj, '__fspath__')


def verify_fileobj(fileobj: IO[bytes],
                   mode: Literal['read', 'write'],
                   ) -> IO[bytes]:
    """验证 ``fileobj`` 是否为以二进制模式打开的文件对象，并返回它。

    Args:
        fileobj: 要验证的目标文件对象
        mode: 需要验证的操作，只能为 'read'（可读）和 'write'（可写）两个值
    """
    if mode not in ('read', 'write'):
        if isinstance(mode, str):
            raise ValueError(f"mode must be either 'read' or 'write', not '{mode}'")
        raise TypeError(f"verify_fileobj() argument 'mode' must be str, not {type(mode).__name__}")

    method_name = mode
    if not callable(getattr(fileobj, method_name, None)):
        raise TypeError(f"{repr(fileobj)} is not a valid file object: method '{method_name}' is missing")

    if mode == 'read':
        try:
            result = fileobj.read(0)
        except Exception as exc:
            raise ValueError(f"cannot read from file object {repr(fileobj)}") from exc
        if not isinstance(result, (bytes, bytearray)):
            raise ValueError(f"file object {repr(fileobj)} is not open in binary mode")
    else:
        try:
            fileobj.write(b'')
        except TypeError as exc:
            raise ValueError(f"file object {repr(fileobj)} is not open in binary mode") from exc
        except Exception as exc:
            raise ValueError(f"cannot write to file object {repr(fileobj)}") from exc

    return fileobj
