"""
Constants for Sims 4 catalog resource codecs.
"""

# Default value of every unset hash field (FNV-1a 32-bit offset basis)
FNV_OFFSET_BASIS = 0x811C9DC5

# CatalogCommon
COMMON_DEFAULT_VERSION = 0x0B
COMMON_PACK_FIELDS_VERSION = 10  # pack id / pack options present from here on
COMMON_WIDE_TAGS_VERSION = 11  # 32-bit tag list from here on
COMMON_PACK_RESERVED_SIZE = 9
DEFAULT_SWATCH_SORT_PRIORITY = 0xFFFF

# Base shapes
SIMPLE_DEFAULT_VERSION = 0x07
ABSTRACT_DEFAULT_VERSION = 0x19
ABSTRACT_FALLBACK_KEY_VERSION = 0x19
ABSTRACT_MAX_AURAL_PROPERTIES_VERSION = 4
DEFAULT_AURAL_MATERIALS_VERSION = 1
DEFAULT_AURAL_PROPERTIES_VERSION = 2
OBJECT_DEFAULT_VERSION = 0x01
OBJECT_DEFAULT_CATALOG_VERSION = 0x09

# Per-type versions and gates
CTPT_DEFAULT_VERSION = 0x02
CBLK_EXTENDED_VERSION = 0x0A
C48C28979_DATA_BLOB2_VERSION = 0x19
C48C28979_DATA_BLOB1_SIZE = 29
C48C28979_DATA_BLOB2_SIZE = 16
CSTL_REFERENCE_COUNT = 25

# Object definition
OBJECT_DEFINITION_DEFAULT_VERSION = 1
OBJECT_DEFINITION_HEADER_SIZE = 6  # u16 version + u32 table position

# Resource type ids
TYPE_COBJ = 0x319E4F1D
TYPE_CCOL = 0x1D6DF1CF
TYPE_CFEN = 0x0418FE2A
TYPE_CSPN = 0x3F0C529A
TYPE_CWAL = 0xD5F0F921
TYPE_CSTR = 0x9A20CD1C
TYPE_CTPT = 0xEBCBB16C
TYPE_CSTL = 0x9F5CFF10
TYPE_CRAL = 0x1C1CF1F7
TYPE_CFRZ = 0xA057811C
TYPE_CFND = 0x2FAE983E
TYPE_CBLK = 0x07936CE0
TYPE_CFTR = 0xE7ADA79D
TYPE_CFLT = 0x84C23219
TYPE_CPLT = 0xA5DFFCF3
TYPE_CRTR = 0xB0311D0F
TYPE_CRPT = 0xF1EDBD86
TYPE_CFLR = 0xB4F762C9
TYPE_STRM = 0x74050B1F
TYPE_C48C28979 = 0x48C28979
TYPE_A8F7B517 = 0xA8F7B517
TYPE_ROOF_STYLE = 0x91EDBD3E
TYPE_OBJECT_DEFINITION = 0xC0DB5AE7
