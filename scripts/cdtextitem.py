#!/usr/bin/env python3
'''
Build a single CD-TEXT item from the command line and print it the way
it appears in a TOC file.

    $ cdtextitem.py TITLE 0 "My Disc"
    TITLE "My Disc"
    $ cdtextitem.py -t 3 ISRC 0 USXXX0000001
    ISRC "USXXX0000001"
    $ cdtextitem.py -b MESSAGE 1 72 105
    MESSAGE {72, 105}

For binary pack types (GENRE, TOC_INFO1/2, SIZE_INFO) or with -b the data are
the decimal values of the bytes.
'''
import os
import sys
import logging

from cdtext.item import CdTextItem, keyword_to_pack_type, is_binary_pack_type
from cdtext.exceptions import CdTextException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} [-t <track>] [-b] <keyword> <block> <data...>')
    sys.exit(1)


def build_item(keyword, block, data, track=0, binary=False):
    pack_type = keyword_to_pack_type(keyword)

    if binary or is_binary_pack_type(pack_type):
        item = CdTextItem.from_binary(pack_type, block, bytes([int(_) for _ in data]))
    else:
        item = CdTextItem.from_text(pack_type, block, ' '.join(data))

    item.track_number = track

    return item


if __name__ == '__main__':
    args = sys.argv[1:]
    track = 0
    binary = False

    try:
        while args and args[0].startswith('-'):
            option = args.pop(0)
            if option == '-t':
                track = int(args.pop(0))
            elif option == '-b':
                binary = True
            else:
                usage(sys.argv[0])

        if len(args) < 3:
            usage(sys.argv[0])

        item = build_item(args[0], int(args[1]), args[2:], track=track, binary=binary)
    except (CdTextException, ValueError, IndexError) as e:
        logger.error(e)
        usage(sys.argv[0])

    item.print()
    print()
