# -*- coding: utf-8 -*-
from __future__ import annotations

__all__ = ['KEY_SIZE', 'STATE_SIZE', 'DISCARD_SIZE']

KEY_SIZE = 8
STATE_SIZE = 256
# 密钥编排后丢弃的密钥流字节数
DISCARD_SIZE = 1024
