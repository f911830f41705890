"""
# CD-TEXT metadata for humans.

CD-TEXT is the area of an audio CD carrying titles, performers, ISRCs and
so on. It's organized in up to 8 blocks (usually one for each language) and
each block contains items of a given pack type, at disc level or for a
specific track.

This package models the single item (see cdtext.item.CdTextItem) with its
two main operations

 1. render(): the textual representation used in TOC files
 2. comparison: two items are the same if they carry the same payload for
    the same pack type and block

and the utilities to move between the pack type indicators found on disc,
the PackType enumeration and the TOC keywords.
"""
