# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import IO

from .common import StreamCipherSkel
from .consts import DISCARD_SIZE, KEY_SIZE, STATE_SIZE
from .typedefs import BytesLike, FilePath
from .typeutils import tobytes

__all__ = ['KStream', 'translate']


class KStream(StreamCipherSkel):
    """基于 RC4 变体的流式加密算法，使用 8 字节密钥。

    与教科书式的 RC4-drop 相比，有两处不同：

    - 密钥编排结束后，只有 ``index_i`` 归零，``index_j`` 保留密钥编排结束时的值；
    - 在输出任何密钥流之前，先生成并丢弃 1024 个字节。

    相同的密钥总是产生相同的密钥流，没有 IV/nonce，因此加密和解密是同一个操作：

    >>> data = KStream(bytes(range(8))).encrypt(b'attack at dawn')
    >>> KStream(bytes(range(8))).decrypt(data)
    b'attack at dawn'

    本类的对象不是线程安全的：同一时间只应有一个调用者使用同一个对象。
    """
    keysize = KEY_SIZE
    statesize = STATE_SIZE
    discard_size = DISCARD_SIZE

    @property
    def master_key(self) -> bytes:
        """创建此对象时使用的密钥。"""
        return self._key

    @property
    def permutation(self) -> bytes:
        """当前置换表（S 盒）的副本。"""
        return bytes(self._permutation)

    @property
    def index_i(self) -> int:
        return self._i

    @property
    def index_j(self) -> int:
        return self._j

    def __init__(self, key: BytesLike, /) -> None:
        """基于 RC4 变体的流式加密算法，使用 8 字节密钥。

        Args:
            key: 密钥，长度必须等于 8；会被原样复制，不会被解释为整数
        """
        key = tobytes(key)
        if len(key) != self.keysize:
            raise ValueError(f'invalid key length: should be {self.keysize}, not {len(key)}')
        self._key = key

        # 使用 KSA 生成 S 盒
        S = bytearray(range(self.statesize))
        j = 0
        for i in range(self.statesize):
            j = (j + S[i] + key[i % self.keysize]) % self.statesize
            S[i], S[j] = S[j], S[i]

        self._permutation = S
        self._i = 0
        self._j = j  # 不归零

        for _ in range(self.discard_size):
            self.next_byte()

    @classmethod
    def from_keyfile(cls, filething: FilePath | IO[bytes], /) -> KStream:
        """从密钥文件 ``filething`` 读取密钥，并以此创建对象。

        ``filething`` 可以是文件路径或以二进制模式打开的可读文件对象。
        文件的全部内容必须恰好为 8 字节，否则会触发 ``exceptions.KeyFileError``。
        """
        from .fileio import read_keyfile

        return cls(read_keyfile(filething))

    def next_byte(self) -> int:
        S = self._permutation
        i = (self._i + 1) % self.statesize
        j = (self._j + S[i]) % self.statesize
        S[i], S[j] = S[j], S[i]
        self._i = i
        self._j = j

        return S[(S[i] + S[j]) % self.statesize]

    def getkey(self, keyname: str = 'master') -> bytes | None:
        if keyname == 'master':
            return self._key

    def __repr__(self) -> str:
        return f'<{type(self).__module__}.{type(self).__name__} object at {hex(id(self))}>'


def translate(kstream: StreamCipherSkel, data: BytesLike, /) -> bytes:
    """用法：``translate(kstream, data) -> translated_bytes``

    使用 ``kstream`` 的密钥流加密或解密 ``data``，等同于 ``kstream.translate(data)``。
    """
    return kstream.translate(data)
