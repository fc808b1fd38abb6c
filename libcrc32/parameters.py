# vim: ts=8 sw=8 noexpandtab
#
#   Parametrized CRC-32 calculator
#
#   Copyright (c) 2023-2024 Michael Buesch <m@bues.ch>
#
#   This program is free software; you can redistribute it and/or modify
#   it under the terms of the GNU General Public License as published by
#   the Free Software Foundation; either version 2 of the License, or
#   (at your option) any later version.
#
#   This program is distributed in the hope that it will be useful,
#   but WITHOUT ANY WARRANTY; without even the implied warranty of
#   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#   GNU General Public License for more details.
#
#   You should have received a copy of the GNU General Public License along
#   with this program; if not, write to the Free Software Foundation, Inc.,
#   51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#

__all__ = [
	"CRC_RFIN",
	"CRC_RFOUT",
	"CRC_RFIO",
	"CRC_ROBYT",
	"CRC_FLAGS_MASK",
	"CUSTOM_NAME",
	"CHECK_DATA",
	"CRC32_PARAMETERS",
]

CRC_RFIN	= 1 << 0 # Reflect input
CRC_RFOUT	= 1 << 1 # Reflect output
CRC_RFIO	= CRC_RFIN | CRC_RFOUT
CRC_ROBYT	= 1 << 2 # Reverse output byte order
CRC_FLAGS_MASK	= CRC_RFIO | CRC_ROBYT

# Reserved name of the user defined parameter set.
CUSTOM_NAME = "user"

# Test vector for the check values.
CHECK_DATA = b"123456789"

# The first entry is the default algorithm.
CRC32_PARAMETERS = {
	"CRC-32" : {
		"polynomial"	: 0x04C11DB7,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0xFFFFFFFF,
		"flags"		: CRC_RFIO,
		"check"		: 0xCBF43926,
		"aliases"	: ("CRC32", "CRC-32/ISO-HDLC", "CRC-32/ETHER", "PKZIP"),
	},
	"CRC-32/BZIP2" : {
		"polynomial"	: 0x04C11DB7,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0xFFFFFFFF,
		"flags"		: 0,
		"check"		: 0xFC891918,
		"aliases"	: ("BZIP2", "CRC-32/AAL5"),
	},
	"CRC-32C" : {
		"polynomial"	: 0x1EDC6F41,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0xFFFFFFFF,
		"flags"		: CRC_RFIO,
		"check"		: 0xE3069283,
		"aliases"	: ("CRC32C", "CRC-32/ISCSI", "CASTAGNOLI"),
	},
	"CRC-32D" : {
		"polynomial"	: 0xA833982B,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0xFFFFFFFF,
		"flags"		: CRC_RFIO,
		"check"		: 0x87315576,
		"aliases"	: ("CRC32D", "CRC-32/BASE91-D"),
	},
	"CRC-32K" : {
		"polynomial"	: 0x741B8CD7,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0x00000000,
		"flags"		: CRC_RFIO,
		"check"		: 0xD2C22F51,
		"aliases"	: ("CRC32K", "KOOPMAN", "CRC-32/MEF"),
	},
	"CRC-32Q" : {
		"polynomial"	: 0x814141AB,
		"init"		: 0x00000000,
		"finalXor"	: 0x00000000,
		"flags"		: 0,
		"check"		: 0x3010BF7F,
		"aliases"	: ("CRC32Q", "CRC-32/AIXM"),
	},
	"JAMCRC" : {
		"polynomial"	: 0x04C11DB7,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0x00000000,
		"flags"		: CRC_RFIO,
		"check"		: 0x340BC6D9,
		"aliases"	: ("JAMCRC32", "CRC-32/JAMCRC"),
	},
	"MPEG-2" : {
		"polynomial"	: 0x04C11DB7,
		"init"		: 0xFFFFFFFF,
		"finalXor"	: 0x00000000,
		"flags"		: 0,
		"check"		: 0x0376E6E7,
		"aliases"	: ("CRC-32/MPEG-2", ),
	},
	"POSIX" : {
		"polynomial"	: 0x04C11DB7,
		"init"		: 0x00000000,
		"finalXor"	: 0xFFFFFFFF,
		"flags"		: 0,
		"check"		: 0x765E7680,
		"aliases"	: ("CKSUM", "CRC-32/POSIX"),
	},
	"XFER" : {
		"polynomial"	: 0x000000AF,
		"init"		: 0x00000000,
		"finalXor"	: 0x00000000,
		"flags"		: 0,
		"check"		: 0xBD0BE338,
		"aliases"	: ("CRC-32/XFER", ),
	},
}
