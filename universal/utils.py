import math
import re

NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_number_default(value, default):
	"""Parses the leading number in value, or returns default.

	Trailing garbage after a numeric prefix is ignored ("5abc" is 5.0).
	Anything that is not a finite number yields the default.
	"""
	if value is None:
		return default
	match = NUMBER_PREFIX.match(str(value))
	if not match:
		return default
	try:
		res = float(match.group(1))
	except ValueError:
		return default
	if math.isnan(res) or not math.isfinite(res):
		return default
	return res

def parse_int_prefix(value):
	match = INTEGER_PREFIX.match(value)
	if not match:
		return None
	return int(match.group(1))

def normalize(content):
	return content.replace("\r\n", "\n").replace("\r", "\n")

def round_half_up(value):
	# halves round towards positive infinity, unlike round()
	return math.floor(value + 0.5)

def format_number(value):
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)

def signed(value):
	if value > 0:
		return "+" + format_number(value)
	return format_number(value)
