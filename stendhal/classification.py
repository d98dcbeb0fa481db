GROUPS = {
    "weapons": ["axes", "clubs", "ranged", "swords", "whips"],
    "armor": ["armors", "boots", "cloaks", "helmets", "legs", "shields"],
    "projectiles": ["arrows", "missiles"],
}

# never offered for selection
EXCLUDES = set(["dummy_weapons"])

RANGED = "ranged"


def is_group(name):
    return name in GROUPS


def group_members(name):
    return list(GROUPS.get(name, []))


def _in_group(group, name):
    return name == group or name in GROUPS[group]


def is_weapon_type(name):
    return _in_group("weapons", name)


def is_armor_type(name):
    return _in_group("armor", name)


def is_ranged_type(name):
    return name == RANGED


def is_projectile_type(name):
    return _in_group("projectiles", name)


def is_excluded(name):
    return name in EXCLUDES
