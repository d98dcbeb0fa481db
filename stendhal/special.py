from stendhal.attributes import number_attribute, string_attribute
from stendhal.classification import (
    is_armor_type,
    is_projectile_type,
    is_ranged_type,
    is_weapon_type,
)
from universal.utils import format_number, parse_number_default
from universal.utils import round_half_up, signed


def special_traits(entry, active_class, atk=None, defense=None, range_=None):
    """Builds the ordered list of trait strings for one item.

    The order of the passes below is the order traits are displayed in.
    atk, defense and range_ override the values read from the entry's
    attributes (merged pairs carry summed stats).
    """
    bag = entry.attributes
    if atk is None:
        atk = number_attribute(bag, "atk")
    if defense is None:
        defense = number_attribute(bag, "def")
    if range_ is None:
        range_ = number_attribute(bag, "range")

    special = []

    def _append(trait):
        if trait not in special:
            special.append(trait)

    damage_nature_pass(bag, _append)
    status_attack_pass(bag, _append)
    susceptibility_pass(entry.susceptibilities, _append)
    lifesteal_pass(bag, _append)
    stat_pass(active_class, atk, defense, range_, _append)
    consumable_pass(bag, _append)
    return special


def damage_nature_pass(bag, append):
    nature = string_attribute(bag, "damagetype")
    if nature is not None:
        append(nature)


def status_attack_pass(bag, append):
    status_attack = string_attribute(bag, "statusattack")
    if status_attack is None:
        return
    if "poison" in status_attack or "venom" in status_attack:
        append("poison")
    elif "," in status_attack:
        append(status_attack.split(",", 1)[1])
    else:
        append(status_attack)


def percent(value):
    """One-decimal percentage of a multiplier (0.255 -> 25.5)."""
    return round_half_up(value * 1000) / 10


def susceptibility_pass(susceptibilities, append):
    for sus_type, raw in susceptibilities:
        # stored inverted: 0.8 means 20% resistant
        display = round(100 - percent(parse_number_default(raw, 1)), 1)
        if display == 0:
            continue
        append("%s (%s%%)" % (sus_type, signed(display)))


def lifesteal_pass(bag, append):
    lifesteal = percent(number_attribute(bag, "lifesteal"))
    if lifesteal != 0:
        append("lifesteal (%s%%)" % signed(lifesteal))


def stat_pass(active_class, atk, defense, range_, append):
    # stats already shown in a dedicated column for the selection are skipped
    if atk != 0 and not (is_weapon_type(active_class) or is_projectile_type(active_class)):
        append("atk=%s" % format_number(atk))
    if defense != 0 and not is_armor_type(active_class):
        append("def (%s)" % format_number(defense))
    if range_ != 0 and not (is_ranged_type(active_class) or is_projectile_type(active_class)):
        append("range (%s)" % format_number(range_))


def consumable_pass(bag, append):
    amount = number_attribute(bag, "amount")
    if amount == 0:
        return
    cure = string_attribute(bag, "immunization")
    if cure is not None and cure.strip():
        append("cure (%s)" % cure)
        append("immunity duration (%s)" % format_number(amount))
        return
    if amount > 0:
        append("heal (%s)" % format_number(amount))
    else:
        append("hurt (%s)" % format_number(amount))
    regen = number_attribute(bag, "regen", amount)
    frequency = number_attribute(bag, "frequency", 1)
    if frequency != 1 or regen != amount:
        append("regen (%s)" % format_number(regen))
        append("frequency (%s)" % format_number(frequency))
