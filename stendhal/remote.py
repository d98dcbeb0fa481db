"""Document sources for the game's data files.

Both sources resolve paths relative to the game repository root
(e.g. ``data/conf/items/swords.xml``) and return the text content, or
None when the document cannot be read.
"""
import os
import sys
from concurrent.futures import ThreadPoolExecutor

import requests

from stendhal.classes import class_document_path

REPO_PREFIX = "https://raw.githubusercontent.com/arianne/stendhal/"
FETCH_TIMEOUT = 30


class RemoteSource():
    def __init__(self, branch="master", timeout=FETCH_TIMEOUT):
        self.branch = branch
        self.timeout = timeout

    def url(self, path):
        return REPO_PREFIX + self.branch + "/" + path

    def fetch_text(self, path):
        url = self.url(path)
        try:
            response = requests.get(
                url, headers={"Content-Type": "text/plain"},
                timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            sys.stderr.write("ERROR: %s: %s\n" % (url, e))
            return None
        return response.text


class LocalSource():
    def __init__(self, root, branch="master"):
        self.root = root
        self.branch = branch

    def fetch_text(self, path):
        filename = os.path.join(self.root, path)
        try:
            with open(filename, encoding="utf-8") as fp:
                return fp.read()
        except OSError as e:
            sys.stderr.write("ERROR: %s: %s\n" % (filename, e))
            return None


def fetch_documents(source, class_names, workers=4):
    """Fetches every class document, returning (class, content) in order."""
    paths = [class_document_path(c) for c in class_names]
    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        contents = list(executor.map(source.fetch_text, paths))
    return list(zip(class_names, contents))
