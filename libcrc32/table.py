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

from libcrc32.util import *

__all__ = [
	"buildTable",
	"genCTable",
]

def buildTable(polynomial, reflectInput):
	"""Calculate the 256 entry remainder lookup table.
	polynomial is in normal (MSB first) notation.
	If reflectInput is True, then the table is built for
	the LSB first (shift right) algorithm.
	"""
	if polynomial < 0 or polynomial > CRC32_MASK:
		raise ValueError(f"Polynomial 0x{polynomial:X} does not fit into 32 bits.")
	table = []
	if reflectInput:
		refPoly = bitreverse(polynomial, 32)
		for i in range(256):
			rem = i
			for _ in range(8):
				if rem & 1:
					rem = (rem >> 1) ^ refPoly
				else:
					rem >>= 1
			table.append(rem)
	else:
		for i in range(256):
			rem = i << 24
			for _ in range(8):
				if rem & 0x80000000:
					rem = ((rem << 1) ^ polynomial) & CRC32_MASK
				else:
					rem = (rem << 1) & CRC32_MASK
			table.append(rem)
	return tuple(table)

def genCTable(table,
	      name="table",
	      crcType="crc32_t",
	      declOnly=False):
	"""Generate C source code for the table.
	"""
	if declOnly:
		return f"extern {crcType} {name}[{len(table)}];"
	ret = [ f"{crcType} {name}[] = {{" ]
	for i in range(0, len(table), 8):
		ret.append("\t" + "".join(f"0x{v:08X}, " for v in table[i : i + 8]))
	ret.append("};")
	return "\n".join(ret)
