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

from dataclasses import dataclass, field
from libcrc32.parameters import *
from libcrc32.table import *
from libcrc32.util import *
from typing import Optional, Tuple

__all__ = [
	"Crc32",
	"CrcError",
	"CrcInvalidArgumentError",
	"CrcNotFoundError",
	"CrcInternalError",
	"Preset",
	"Custom",
	"PRESETS",
]

class CrcError(Exception):
	pass

class CrcInvalidArgumentError(CrcError):
	pass

class CrcNotFoundError(CrcError):
	pass

class CrcInternalError(CrcError):
	pass

class _ParameterSet(object):
	@property
	def reflectInput(self):
		return bool(self.flags & CRC_RFIN)

	@property
	def reflectOutput(self):
		return bool(self.flags & CRC_RFOUT)

	@property
	def reverseOutputBytes(self):
		return bool(self.flags & CRC_ROBYT)

	def summary(self):
		return (f'name="{self.name}" '
			f"poly=0x{self.polynomial:08X} "
			f"init=0x{self.initialValue:08X} "
			f"final=0x{self.finalXor:08X} "
			f"flags={self.flags}")

@dataclass(frozen=True)
class Preset(_ParameterSet):
	name: str
	polynomial: int
	initialValue: int
	finalXor: int
	flags: int
	checkValue: int
	aliases: Tuple[str, ...] = ()

@dataclass(frozen=True)
class Custom(_ParameterSet):
	initialValue: int
	finalXor: int
	polynomial: int
	flags: int
	name: str = field(default=CUSTOM_NAME, init=False)
	checkValue: Optional[int] = field(default=None, init=False)

	def __post_init__(self):
		# Mask all values to their valid ranges.
		object.__setattr__(self, "initialValue", self.initialValue & CRC32_MASK)
		object.__setattr__(self, "finalXor", self.finalXor & CRC32_MASK)
		object.__setattr__(self, "polynomial", self.polynomial & CRC32_MASK)
		object.__setattr__(self, "flags", self.flags & CRC_FLAGS_MASK)

PRESETS = tuple(
	Preset(name=name,
	       polynomial=p["polynomial"],
	       initialValue=p["init"],
	       finalXor=p["finalXor"],
	       flags=p["flags"],
	       checkValue=p["check"],
	       aliases=p["aliases"])
	for name, p in CRC32_PARAMETERS.items()
)

_PRESETS_BY_NAME = {
	n.lower() : preset
	for preset in PRESETS
	for n in (preset.name, ) + preset.aliases
}

class Crc32(object):
	"""Table driven CRC-32 calculator context.

	The context holds the selected algorithm and the cached lookup table.
	It is not thread safe. Use one context per thread
	or lock around all calls.

	Typical use:

		ctx = Crc32()
		ctx.selectAlgorithm("CRC-32C")
		crc = ctx.init()
		crc = ctx.update(crc, chunk0)
		crc = ctx.update(crc, chunk1)
		crc = ctx.final(crc)
	"""

	def __init__(self, algorithm=None):
		default = PRESETS[0]
		self.__custom = Custom(initialValue=default.initialValue,
				       finalXor=default.finalXor,
				       polynomial=default.polynomial,
				       flags=default.flags)
		self.__algorithm = default
		self.__table = None
		if algorithm is not None:
			self.selectAlgorithm(algorithm)

	@property
	def algorithm(self):
		"""The currently selected parameter set.
		"""
		return self.__algorithm

	@property
	def custom(self):
		"""The current user defined parameter set.
		"""
		return self.__custom

	@property
	def table(self):
		"""The lookup table of the selected algorithm.
		"""
		self.__ensureTable()
		return self.__table

	@property
	def tableValid(self):
		return self.__table is not None

	def __setAlgorithm(self, algorithm):
		self.__algorithm = algorithm
		self.__table = None

	def __ensureTable(self):
		if self.__table is None:
			a = self.__algorithm
			try:
				self.__table = buildTable(a.polynomial, a.reflectInput)
			except (ValueError, MemoryError) as e:
				raise CrcInternalError(f"Failed to build the CRC table: {e}")

	def selectAlgorithm(self, name):
		"""Select a preset algorithm by name (case insensitive).
		The reserved name 'user' selects the user defined parameters.
		"""
		if not name:
			raise CrcNotFoundError("No algorithm name given.")
		lname = name.lower()
		if lname == CUSTOM_NAME:
			self.__setAlgorithm(self.__custom)
			return
		preset = _PRESETS_BY_NAME.get(lname)
		if preset is None:
			raise CrcNotFoundError(f"Unrecognized algorithm '{name}'.")
		self.__setAlgorithm(preset)

	def selectCustom(self, initialValue, finalXor, polynomial, flags):
		"""Replace the user defined parameters and select them.
		"""
		self.__custom = Custom(initialValue=initialValue,
				       finalXor=finalXor,
				       polynomial=polynomial,
				       flags=flags)
		self.__setAlgorithm(self.__custom)

	def listAlgorithms(self):
		"""Get all presets and the user defined parameter set.
		"""
		return list(PRESETS) + [ self.__custom, ]

	def dumpAlgorithms(self):
		return "\n".join(a.summary() for a in self.listAlgorithms())

	def dumpParameters(self):
		return self.__algorithm.summary()

	def dumpTable(self, name="table"):
		return genCTable(self.table, name=name)

	def init(self):
		"""Start a new calculation.
		Returns the initial CRC register value.
		"""
		self.__ensureTable()
		return self.__algorithm.initialValue

	def update(self, crc, data, length=None):
		"""Feed data into the CRC register.
		length limits the number of bytes taken from data.
		Returns the new CRC register value.
		"""
		if crc is None:
			raise CrcInvalidArgumentError("No CRC register value given.")
		if data is None:
			raise CrcInvalidArgumentError("No data given.")
		try:
			data = memoryview(data).cast("B")
		except TypeError:
			raise CrcInvalidArgumentError(
				f"Data of type '{type(data).__name__}' is not a byte buffer.")
		if length is not None:
			if length < 0 or length > len(data):
				raise CrcInvalidArgumentError(
					f"Invalid data length {length} "
					f"(buffer size is {len(data)}).")
			data = data[:length]
		self.__ensureTable()
		table = self.__table
		crc &= CRC32_MASK
		if self.__algorithm.reflectInput:
			for b in bytes(data):
				crc = (crc >> 8) ^ table[(crc ^ b) & 0xFF]
		else:
			for b in bytes(data):
				crc = ((crc << 8) & CRC32_MASK) ^ table[(crc >> 24) ^ b]
		return crc

	def final(self, crc):
		"""Finish the calculation.
		Returns the final CRC value.
		"""
		if crc is None:
			raise CrcInvalidArgumentError("No CRC register value given.")
		a = self.__algorithm
		crc &= CRC32_MASK
		if a.reflectInput != a.reflectOutput:
			crc = bitreverse(crc, 32)
		crc ^= a.finalXor
		if a.reverseOutputBytes:
			crc = byteswap32(crc)
		return crc

	def calc(self, data, length=None):
		"""Calculate the CRC of a complete buffer.
		"""
		crc = self.init()
		crc = self.update(crc, data, length)
		return self.final(crc)
