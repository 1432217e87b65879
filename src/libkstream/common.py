# -*- coding: utf-8 -*-
from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Generator

from .miscutils import bytestrxor
from .typedefs import BytesLike, IntegerLike, WritableBuffer
from .typeutils import tobytes, toint_nofloat

__all__ = ['StreamCipherSkel']


class StreamCipherSkel(metaclass=ABCMeta):
    """适用于有状态流式加密算法的框架类。子类必须实现 ``next_byte()`` 方法。

    与可随意跳转的密钥流不同，这类算法的密钥流只能从头到尾依次生成：
    每生成一个字节，内部状态都会向前推进一步，且无法回退。
    因此，对同一个对象的所有 ``translate()``/``encrypt()``/``decrypt()``
    调用会依次消耗同一条密钥流。

    如需从头开始处理另一段数据，请使用相同的密钥重新创建对象。
    """

    @abstractmethod
    def next_byte(self) -> int:
        """将内部状态推进一步，并返回密钥流的下一个字节。"""
        raise NotImplementedError

    def keystream(self, nbytes: IntegerLike | None = None, /) -> Generator[int, None, None]:
        """返回一个生成器对象，对其进行迭代，即可依次得到 ``nbytes`` 个密钥流字节。

        生成器是惰性的：只有在迭代时才会调用 ``next_byte()``，每迭代一次调用一次。
        对 ``nbytes`` 的检查同样推迟到首次迭代时进行：调用本方法本身不会触发异常。

        Args:
            nbytes: 要生成的密钥流长度，不应为负数；如果为 ``None``，则生成无限长的密钥流
        """
        if nbytes is None:
            while True:
                yield self.next_byte()

        nbytes = toint_nofloat(nbytes)
        if nbytes < 0:
            raise ValueError("first argument 'nbytes' must be a non-negative integer")

        for _ in range(nbytes):
            yield self.next_byte()

    def __iter__(self) -> Generator[int, None, None]:
        return self.keystream()

    def translate(self, data: BytesLike, /) -> bytes:
        """将 ``data`` 的每个字节依次与密钥流的下一个字节异或，返回结果。

        加密和解密是同一个操作。输入为空时，不会消耗任何密钥流。

        Args:
            data: 要加密或解密的数据
        """
        data = tobytes(data)

        return bytestrxor(data, self.keystream(len(data)))

    def translate_into(self, data: BytesLike, buffer: WritableBuffer, /) -> int:
        """与 ``translate()`` 相同，但将结果写入可写缓冲区 ``buffer`` 的开头，
        并返回写入的字节数。

        ``buffer`` 必须可写，否则会触发 ``TypeError``；其长度不能小于 ``data``
        的长度，否则会触发 ``ValueError``。两种情况下都不会消耗任何密钥流。
        """
        data = tobytes(data)
        memview = memoryview(buffer).cast('B')
        if memview.readonly:
            raise TypeError(f"buffer must be writable, not read-only '{type(buffer).__name__}'")
        if len(memview) < len(data):
            raise ValueError(f'buffer too small: need {len(data)} bytes, got {len(memview)}')

        memview[:len(data)] = self.translate(data)

        return len(data)

    def encrypt(self, plaindata: BytesLike, /) -> bytes:
        """加密明文 ``plaindata`` 并返回加密结果。等同于 ``translate()``。"""
        return self.translate(plaindata)

    def decrypt(self, cipherdata: BytesLike, /) -> bytes:
        """解密密文 ``cipherdata`` 并返回解密结果。等同于 ``translate()``。"""
        return self.translate(cipherdata)
