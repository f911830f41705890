'''
# CD-TEXT item

An item is the payload of one pack type for one block (and optionally one
track) of the CD-TEXT area, e.g. the TITLE of the disc in block 0 or the ISRC
of track 3.

The payload is one of

 1. TEXT: a single byte character code string terminated by a zero byte,
    the terminator is part of the payload and of its length
 2. BINARY: raw bytes, like TOC_INFO1/2, SIZE_INFO and GENRE

The items are chained by the container owning them via the "successor"
attribute: the item itself never looks at it and a copy never inherits it.

The textual representation is the one used by the TOC files, for example

    TITLE "My Disc"
    GENRE { 1,  5}

Splitting the items into 18 bytes packs and the CRC are responsibility of
the container.
'''
import logging
import sys
from typing import Optional, Union

from bitstring import BitArray

from .enum import Compliant, EncodingKind, GenreCode, PackType
from .exceptions import InvalidBlockException, UnknownPackTypeException
from .properties import PropertyDescriptor, RangeDescriptor


logger = logging.getLogger(__name__)


BLOCK_MIN = 0
BLOCK_MAX = 7
TRACK_MAX = 99

# binary payloads are dumped with this many entries for line
BINARY_ENTRIES_PER_LINE = 12
BINARY_INDENTATION = ' ' * 15

SBCC_ENCODING = 'latin1'


_PACK_TYPE_KEYWORDS = {
    PackType.TITLE:      'TITLE',
    PackType.PERFORMER:  'PERFORMER',
    PackType.SONGWRITER: 'SONGWRITER',
    PackType.COMPOSER:   'COMPOSER',
    PackType.ARRANGER:   'ARRANGER',
    PackType.MESSAGE:    'MESSAGE',
    PackType.DISC_ID:    'DISC_ID',
    PackType.GENRE:      'GENRE',
    PackType.TOC_INFO1:  'TOC_INFO1',
    PackType.TOC_INFO2:  'TOC_INFO2',
    PackType.RESERVED1:  'RESERVED1',
    PackType.RESERVED2:  'RESERVED2',
    PackType.RESERVED3:  'RESERVED3',
    PackType.CLOSED:     'CLOSED',
    PackType.SIZE_INFO:  'SIZE_INFO',
}

_KEYWORD_PACK_TYPES = {keyword: pack_type for pack_type, keyword in _PACK_TYPE_KEYWORDS.items()}
_KEYWORD_PACK_TYPES.update({
    'ISRC':    PackType.UPC_EAN_ISRC,
    'UPC_EAN': PackType.UPC_EAN_ISRC,
})

_BINARY_PACK_TYPES = frozenset([
    PackType.TOC_INFO1,
    PackType.TOC_INFO2,
    PackType.SIZE_INFO,
    PackType.GENRE,
])


def pack_type_to_keyword(pack_type: PackType, is_track_item: bool) -> str:
    '''Return the keyword used in TOC files for the given pack type.

    UPC_EAN_ISRC is the only one depending on the context: a track has an ISRC,
    the disc has an UPC/EAN.'''
    if pack_type == PackType.UPC_EAN_ISRC:
        return 'ISRC' if is_track_item else 'UPC_EAN'

    return _PACK_TYPE_KEYWORDS.get(pack_type, 'UNKNOWN')


def keyword_to_pack_type(keyword: str) -> PackType:
    try:
        return _KEYWORD_PACK_TYPES[keyword]
    except KeyError:
        raise UnknownPackTypeException(['keyword'], f'unknown CD-TEXT keyword {keyword!r}')


def decode_pack_type(raw_code: int, compliant: Compliant = Compliant.NONE) -> PackType:
    '''Map the pack type indicator found on disc to PackType.

    An unknown code is decoded as TITLE unless the ENUM compliance is requested,
    in that case UnknownPackTypeException is raised.'''
    try:
        return PackType(raw_code)
    except ValueError:
        if compliant & Compliant.ENUM:
            raise UnknownPackTypeException(['pack_type'], f'unknown pack type {raw_code!r}')

    logger.warning('pack type %r doesn\'t exist, falling back to %s', raw_code, PackType.TITLE)

    return PackType.TITLE


def encode_pack_type(pack_type: PackType) -> int:
    return pack_type.value


def is_binary_pack_type(pack_type: PackType) -> bool:
    '''Tell if the payload of the given pack type is binary data instead of text.'''
    return pack_type in _BINARY_PACK_TYPES


def _to_sbcc(text: Union[str, bytes]) -> bytes:
    '''Return the bytes of the string, stopping at the first zero byte if any.'''
    raw = text.encode(SBCC_ENCODING) if isinstance(text, str) else bytes(text)

    return raw.split(b'\x00', 1)[0]


class CdTextItem(object):
    """
    The payload for one pack type in one block of the CD-TEXT area.

    Everything but track_number and successor is fixed at construction: use
    one of the from_*() class methods instead of instantiating it directly.
    """
    encoding     = PropertyDescriptor('encoding', EncodingKind, read_only=True)
    pack_type    = PropertyDescriptor('pack_type', PackType, read_only=True)
    block_number = RangeDescriptor('block_number', BLOCK_MIN, BLOCK_MAX, exc=InvalidBlockException, read_only=True)
    track_number = RangeDescriptor('track_number', 0, TRACK_MAX)
    payload      = PropertyDescriptor('payload', bytes, read_only=True, nullable=True)

    def __init__(self, pack_type: PackType, block_number: int, encoding: EncodingKind, payload: Optional[bytes] = None):
        self.pack_type = pack_type
        self.block_number = block_number
        self.encoding = encoding

        payload = bytes(payload) if payload else None
        if encoding == EncodingKind.TEXT and (payload is None or payload[-1] != 0):
            raise ValueError('a text payload must be terminated by a zero byte')

        self.payload = payload
        self.track_number = 0
        self.successor: Optional["CdTextItem"] = None

        logger.debug('created %r', self)

    @classmethod
    def from_text(cls, pack_type: PackType, block_number: int, text: Union[str, bytes]) -> "CdTextItem":
        '''Text item: the payload is the string plus its terminator.

        A str is encoded as ISO-8859-1, the single byte character set of CD-TEXT.'''
        return cls(pack_type, block_number, EncodingKind.TEXT, _to_sbcc(text) + b'\x00')

    @classmethod
    def from_binary(cls, pack_type: PackType, block_number: int, data: Optional[bytes], length: Optional[int] = None) -> "CdTextItem":
        '''Binary item using the first "length" bytes of data (all of them by default).'''
        data = bytes(data) if data is not None else b''
        length = len(data) if length is None else length

        if not 0 <= length <= len(data):
            raise ValueError(f'length {length} is out of the data boundaries (that is {len(data)} bytes)')

        return cls(pack_type, block_number, EncodingKind.BINARY, data[:length])

    @classmethod
    def from_genre(cls, block_number: int, code1: int, code2: int, description: Optional[Union[str, bytes]] = None) -> "CdTextItem":
        '''Genre item: two bytes of genre code optionally followed by a zero terminated description.'''
        payload = bytes([code1, code2])

        if description is not None:
            payload += _to_sbcc(description) + b'\x00'

        return cls(PackType.GENRE, block_number, EncodingKind.BINARY, payload)

    @classmethod
    def from_raw(cls, pack_type: PackType, block_number: int, raw: bytes) -> "CdTextItem":
        '''Build the item choosing between text and binary based on the pack type,
        this is what a decoder of CD-TEXT data needs.'''
        if is_binary_pack_type(pack_type):
            return cls.from_binary(pack_type, block_number, raw)

        return cls.from_text(pack_type, block_number, raw)

    def copy(self) -> "CdTextItem":
        '''The copy is not linked to any other item.'''
        other = self.__class__(self.pack_type, self.block_number, self.encoding, self.payload)
        other.track_number = self.track_number

        return other

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def payload_len(self) -> int:
        return len(self.payload) if self.payload is not None else 0

    @property
    def is_track_item(self) -> bool:
        return self.track_number > 0

    @property
    def keyword(self) -> str:
        return pack_type_to_keyword(self.pack_type, self.is_track_item)

    @property
    def text(self) -> Optional[str]:
        if self.encoding != EncodingKind.TEXT:
            return None

        return self.payload[:-1].decode(SBCC_ENCODING)

    @property
    def genre_code(self) -> Optional[int]:
        '''The genre code is a 16 bits big-endian value.'''
        if self.pack_type != PackType.GENRE or self.payload_len < 2:
            return None

        return BitArray(self.payload[:2]).uintbe

    @property
    def genre(self) -> Optional[GenreCode]:
        code = self.genre_code
        if code is None:
            return None

        try:
            return GenreCode(code)
        except ValueError:
            logger.debug('genre code 0x%04x is reserved or registered', code)
            return None

    @property
    def genre_description(self) -> Optional[str]:
        if self.pack_type != PackType.GENRE or self.payload_len <= 2:
            return None

        return _to_sbcc(self.payload[2:]).decode(SBCC_ENCODING)

    def __eq__(self, other):
        if not isinstance(other, CdTextItem):
            return NotImplemented

        # the track number doesn't take part in the comparison
        return (
            self.pack_type == other.pack_type and
            self.block_number == other.block_number and
            self.encoding == other.encoding and
            self.payload_len == other.payload_len and
            self.payload == other.payload
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result

        return not result

    def __hash__(self):
        return hash((self.pack_type, self.block_number, self.encoding, self.payload))

    def __repr__(self):
        return '<%s(pack_type=%s,block_number=%d,track_number=%d,encoding=%s,payload=%r)>' % (
            self.__class__.__name__,
            self.pack_type.name,
            self.block_number,
            self.__dict__.get('track_number', 0),
            self.encoding.name,
            self.payload,
        )

    def _render_text(self) -> str:
        chars = []
        # the terminator is never printed
        for byte in self.payload[:-1]:
            if byte == ord('"'):
                chars.append('\\"')
            elif 0x20 <= byte <= 0x7e:
                chars.append(chr(byte))
            else:
                chars.append('\\%03o' % byte)

        return '"%s"' % ''.join(chars)

    def _render_binary(self) -> str:
        entries = []
        for idx, byte in enumerate(self.payload or b''):
            if idx == 0:
                separator = ''
            elif idx % BINARY_ENTRIES_PER_LINE == 0:
                separator = ',\n' + BINARY_INDENTATION
            else:
                separator = ', '

            entries.append('%s%2d' % (separator, byte))

        return '{%s}' % ''.join(entries)

    def render(self) -> str:
        literal = self._render_text() if self.encoding == EncodingKind.TEXT else self._render_binary()

        return '%s %s' % (self.keyword, literal)

    def __str__(self):
        return self.render()

    def print(self, out=None):
        '''Write the rendering to "out" (by default the standard output).'''
        out = out if out is not None else sys.stdout
        out.write(self.render())
