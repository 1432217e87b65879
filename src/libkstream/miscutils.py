# -*- coding: utf-8 -*-
from __future__ import annotations

from .typedefs import BytesLike
from .typeutils import tobytes

__all__ = [
    'bytestrxor',
    'bytes2display'
]


def bytestrxor(term1: BytesLike, term2: BytesLike, /) -> bytes:
    """用法：``bytestrxor(term1, term2) -> xored_bytes``

    返回两个字节对象或类字节对象 ``term1`` 和 ``term2`` 经过异或之后的结果。

    ``term2`` 可以是一个由整数组成的可迭代对象（例如密钥流生成器），
    它会被完整地迭代一次。

    ``term1`` 和 ``term2`` 在转换为 ``bytes`` 之后的长度必须相等，否则会触发
    ``ValueError``。
    """
    bytestring1 = tobytes(term1)
    bytestring2 = tobytes(term2)

    if len(bytestring1) != len(bytestring2):
        raise ValueError('only byte strings of equal length can be xored')

    return bytes(b1 ^ b2 for b1, b2 in zip(bytestring1, bytestring2))


def bytes2display(data: BytesLike, /) -> str:
    """用法：``bytes2display(data) -> text``

    将 ``data`` 转换为适合在终端上显示的文本：

    - 数值小于 128 的字节，原样输出为对应的字符；
    - 数值大于等于 128 的字节，输出为两位小写十六进制数字。

    转换结果仅用于显示，无法还原为原始数据。

    >>> bytes2display(b'A\\xff')
    'Aff'
    """
    return ''.join(chr(b) if b < 128 else f'{b:02x}' for b in tobytes(data))
