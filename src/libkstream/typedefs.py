# -*- coding: utf-8 -*-
from __future__ import annotations

import array
import mmap
from os import PathLike
from typing import Iterable, Iterator, Protocol, Sequence, SupportsBytes, SupportsIndex, SupportsInt, Union, runtime_checkable

__all__ = [
    'AbleConvertToBytes',
    'AbleConvertToInt',
    'BytesLike',
    'IntegerLike',
    'WritableBuffer',
    'FilePath',
    'KeyStreamGeneratorProto',
    'TranslatorProto'
]

AbleConvertToBytes = Union[SupportsBytes, Iterable[int], Sequence[int]]
AbleConvertToInt = Union[SupportsInt, SupportsIndex]

BytesLike = Union[bytes, bytearray, memoryview, AbleConvertToBytes]
IntegerLike = Union[int, AbleConvertToInt]
WritableBuffer = Union[bytearray, memoryview, array.array, mmap.mmap]

FilePath = Union[str, bytes, PathLike]


@runtime_checkable
class KeyStreamGeneratorProto(Protocol):
    def next_byte(self) -> int:
        raise NotImplementedError

    def keystream(self, nbytes: IntegerLike | None = None, /) -> Iterator[int]:
        raise NotImplementedError


@runtime_checkable
class TranslatorProto(Protocol):
    def translate(self, data: BytesLike, /) -> bytes:
        raise NotImplementedError

    def encrypt(self, plaindata: BytesLike, /) -> bytes:
        raise NotImplementedError

    def decrypt(self, cipherdata: BytesLike, /) -> bytes:
        raise NotImplementedError
