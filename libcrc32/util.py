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

import re

__all__ = [
	"CRC32_MASK",
	"bitreverse",
	"byteswap32",
	"hexInt",
	"humanSize",
]

CRC32_MASK = 0xFFFFFFFF

def bitreverse(value, nrBits=32):
	"""Reverse the bits in an integer.
	"""
	ret = 0
	for _ in range(nrBits):
		ret = (ret << 1) | (value & 1)
		value >>= 1
	return ret

def byteswap32(value):
	"""Reverse the byte order of a 32 bit integer.
	The bit order within the bytes is not touched.
	"""
	return int.from_bytes((value & CRC32_MASK).to_bytes(4, "little"), "big")

def hexInt(string):
	"""Convert a hexadecimal string (with or without 0x prefix) to int.
	"""
	m = re.fullmatch(r"(?:0[xX])?([0-9a-fA-F]+)", string.strip())
	if not m:
		raise ValueError(f"Invalid hexadecimal value '{string}'.")
	value = int(m.group(1), 16)
	if value > CRC32_MASK:
		raise ValueError(f"Value '{string}' does not fit into 32 bits.")
	return value

def humanSize(size):
	"""Scale a byte count down to at most 1024 units.
	Returns a tuple (scaledSize, prefixCharacter).
	"""
	prefixes = " KMGTPEZY"
	pfx = 0
	while size > 1024 and pfx < len(prefixes) - 1:
		size //= 1024
		pfx += 1
	return size, prefixes[pfx]
