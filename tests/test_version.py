from stendhal.version import parse_version, version_string

PROPERTIES = "\r\n".join([
    "# build properties",
    "version=1.49",
    "version.old=1.48.5",
    "version.older=1.0",
])


class TestParseVersion:
    def test_version_old(self):
        assert parse_version(PROPERTIES) == (1, 48, 5)

    def test_missing(self):
        assert parse_version("version=1.49\n") is None

    def test_none(self):
        assert parse_version(None) is None

    def test_leading_digits(self):
        assert parse_version("version.old = 1.50rc1\n") == (1, 50)

    def test_bad_component_dropped(self, capsys):
        assert parse_version("version.old=1.x.2") == (1, 2)
        assert "Bad version component" in capsys.readouterr().err


class TestVersionString:
    def test_dotted(self):
        assert version_string((1, 48, 5)) == "1.48.5"

    def test_empty(self):
        assert version_string(None) == ""
