#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .exceptions import KStreamIOError
from .fileio import read_inputfile, write_display, write_outputfile
from .kstream import KStream
from .pkgver import progname as pkgname, version

progname = Path(sys.argv[0]).name
if progname == '__main__.py':
    progname = f'python -m {pkgname()}'

ap = argparse.ArgumentParser(prog=progname,
                             add_help=False,
                             formatter_class=argparse.RawTextHelpFormatter,
                             usage='%(prog)s [-h] [-V] key-file input-file (output-file|-)',
                             description='使用 8 字节密钥加密或解密文件。加密和解密是同一个操作。'
                             )
required_optargs = ap.add_argument_group('必需参数')
required_optargs.add_argument('keyfile',
                              metavar='key-file',
                              type=Path,
                              help='密钥文件的路径，文件内容必须恰好为 8 个字节'
                              )
required_optargs.add_argument('inputfile',
                              metavar='input-file',
                              type=Path,
                              help='输入文件的路径，其全部内容会被读入内存'
                              )
required_optargs.add_argument('outputfile',
                              metavar='(output-file|-)',
                              help='输出文件的路径。如果为 -，则将结果以可读形式打印到标准输出：\n'
                                   '数值小于 128 的字节原样输出，其余字节输出为两位小写十六进制数字。'
                              )

optional_optargs = ap.add_argument_group('可选参数')
optional_optargs.add_argument('-h', '--help',
                              action='help',
                              help='显示帮助信息并退出'
                              )
optional_optargs.add_argument('-V', '--version',
                              action='version',
                              version=f'%(prog)s {version()}',
                              help='显示版本信息并退出'
                              )


def main(argv: list[str] | None = None) -> int:
    optargs = ap.parse_args(argv)

    keyfile: Path = optargs.keyfile
    inputfile: Path = optargs.inputfile
    outputfile: str = optargs.outputfile

    try:
        kstream = KStream.from_keyfile(keyfile)
        data = read_inputfile(inputfile)
        result = kstream.translate(data)
        if outputfile == '-':
            write_display(result)
        else:
            write_outputfile(outputfile, result)
    except KStreamIOError as exc:
        print(f'{progname}: 错误：{exc}', file=sys.stderr)
        ap.print_usage(sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
