import sys

from universal.utils import normalize, parse_int_prefix

PROPERTIES = "build.ant.properties"
VERSION_KEY = "version.old"


def parse_version(content):
    if not content:
        return None
    for line in normalize(content).split("\n"):
        if not line.startswith(VERSION_KEY) or "=" not in line:
            continue
        version = []
        for part in line.split("=", 1)[1].strip().split("."):
            number = parse_int_prefix(part)
            if number is None:
                sys.stderr.write("WARNING: Bad version component: %r\n" % part)
                continue
            version.append(number)
        return tuple(version)
    return None


def version_string(version):
    if not version:
        return ""
    return ".".join([str(v) for v in version])
