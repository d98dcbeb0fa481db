import sys

from bs4 import BeautifulSoup

from stendhal.classification import GROUPS, group_members, is_excluded, is_group

DEFAULT_CLASS = "weapons"
ITEMS_CONFIG = "data/conf/items.xml"
URI_PREFIX = "items/"


def class_document_path(class_name):
    return "data/conf/items/%s.xml" % class_name


def parse_classes(content):
    """Reads item class names from the items configuration document."""
    if not content:
        return []
    soup = BeautifulSoup(content, "xml")
    class_names = []
    for group in soup.find_all("group"):
        uri = group.get("uri", "")
        if not uri.startswith(URI_PREFIX) or not uri.endswith(".xml"):
            continue
        class_name = uri[len(URI_PREFIX):-len(".xml")]
        if is_excluded(class_name) or class_name in class_names:
            continue
        class_names.append(class_name)
    return class_names


def available_classes(class_names):
    groups = [
        group for group, members in GROUPS.items()
        if any(m in class_names for m in members)]
    return groups + list(class_names)


def select_class(name, available):
    if name in available:
        return name
    if name is not None:
        sys.stderr.write("WARNING: Unknown item class: %s\n" % name)
    return DEFAULT_CLASS


def classes_for_selection(selected, available):
    if is_group(selected):
        return [m for m in group_members(selected) if m in available]
    if selected in available:
        return [selected]
    return []
