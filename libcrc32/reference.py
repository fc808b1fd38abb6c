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
	"Crc32Reference",
]

from typing import Iterable

class Crc32Reference(object):
	"""Bit by bit CRC-32 reference implementation.
	This is slow, but it does not depend on a lookup table.
	"""

	@classmethod
	def crc(cls,
		crc: int,
		data: int,
		polynomial: int,
		shiftRight: bool = False):
		"""Run one data byte through the CRC shift register.
		The polynomial is in normal (MSB first) notation.
		"""
		if shiftRight:
			refPoly = bitreverse(polynomial, 32)
			for i in range(8):
				crc ^= data & 1
				data >>= 1
				if crc & 1:
					crc = (crc >> 1) ^ refPoly
				else:
					crc >>= 1
		else:
			for i in range(8):
				crc ^= ((data >> 7) & 1) << 31
				data <<= 1
				if crc & 0x80000000:
					crc = ((crc << 1) ^ polynomial) & CRC32_MASK
				else:
					crc = (crc << 1) & CRC32_MASK
		return crc

	@classmethod
	def crcBlock(cls,
		     data: Iterable,
		     polynomial: int,
		     initialValue: int = CRC32_MASK,
		     finalXor: int = CRC32_MASK,
		     reflectInput: bool = True,
		     reflectOutput: bool = True,
		     reverseOutputBytes: bool = False):
		crc = initialValue
		for b in data:
			crc = cls.crc(crc=crc,
				      data=b,
				      polynomial=polynomial,
				      shiftRight=reflectInput)
		if reflectInput != reflectOutput:
			crc = bitreverse(crc, 32)
		crc ^= finalXor
		if reverseOutputBytes:
			crc = byteswap32(crc)
		return crc

	@classmethod
	def crcParams(cls, data: Iterable, params):
		"""Calculate the CRC of data with a parameter set object.
		"""
		return cls.crcBlock(data=data,
				    polynomial=params.polynomial,
				    initialValue=params.initialValue,
				    finalXor=params.finalXor,
				    reflectInput=params.reflectInput,
				    reflectOutput=params.reflectOutput,
				    reverseOutputBytes=params.reverseOutputBytes)
