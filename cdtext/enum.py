'''
This module contains the constant values used throughout the CD-TEXT specification.

Note: use Enum for value that cannot ORed together, Flag for the others.
'''
from enum import Enum, Flag


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE  = 0
    ENUM  = 1 << 0


class EncodingKind(Enum):
    '''How the payload of an item must be interpreted.

    TEXT is a single byte character code (SBCC) string terminated by one zero byte,
    BINARY is raw data without terminator.'''
    TEXT   = 0
    BINARY = 1


class PackType(Enum):
    '''The pack type indicator, i.e. the first byte of each pack in the CD-TEXT area.'''
    TITLE        = 0x80
    PERFORMER    = 0x81
    SONGWRITER   = 0x82
    COMPOSER     = 0x83
    ARRANGER     = 0x84
    MESSAGE      = 0x85
    DISC_ID      = 0x86
    GENRE        = 0x87
    TOC_INFO1    = 0x88
    TOC_INFO2    = 0x89
    RESERVED1    = 0x8a
    RESERVED2    = 0x8b
    RESERVED3    = 0x8c
    CLOSED       = 0x8d
    UPC_EAN_ISRC = 0x8e
    SIZE_INFO    = 0x8f


class GenreCode(Enum):
    '''Genre categories stored big-endian in the first two bytes of a GENRE item.

    Values from 0x001c up to 0x7fff are reserved, the ones from 0x8000 are
    registered by the RIAA.'''
    NOT_USED               = 0x0000
    NOT_DEFINED            = 0x0001
    ADULT_CONTEMPORARY     = 0x0002
    ALTERNATIVE_ROCK       = 0x0003
    CHILDRENS_MUSIC        = 0x0004
    CLASSICAL              = 0x0005
    CONTEMPORARY_CHRISTIAN = 0x0006
    COUNTRY                = 0x0007
    DANCE                  = 0x0008
    EASY_LISTENING         = 0x0009
    EROTIC                 = 0x000a
    FOLK                   = 0x000b
    GOSPEL                 = 0x000c
    HIP_HOP                = 0x000d
    JAZZ                   = 0x000e
    LATIN                  = 0x000f
    MUSICAL                = 0x0010
    NEW_AGE                = 0x0011
    OPERA                  = 0x0012
    OPERETTA               = 0x0013
    POP_MUSIC              = 0x0014
    RAP                    = 0x0015
    REGGAE                 = 0x0016
    ROCK_MUSIC             = 0x0017
    RHYTHM_AND_BLUES       = 0x0018
    SOUND_EFFECTS          = 0x0019
    SPOKEN_WORD            = 0x001a
    WORLD_MUSIC            = 0x001b
