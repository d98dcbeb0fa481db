from stendhal.classification import (
    group_members,
    is_armor_type,
    is_excluded,
    is_group,
    is_projectile_type,
    is_ranged_type,
    is_weapon_type,
)


class TestWeaponType:
    def test_member(self):
        assert is_weapon_type("axes")

    def test_group_name(self):
        assert is_weapon_type("weapons")

    def test_armor_is_not_weapon(self):
        assert not is_weapon_type("helmets")


class TestArmorType:
    def test_member(self):
        assert is_armor_type("legs")

    def test_group_name(self):
        assert is_armor_type("armor")

    def test_weapon_is_not_armor(self):
        assert not is_armor_type("swords")


class TestRangedType:
    def test_ranged(self):
        assert is_ranged_type("ranged")

    def test_swords(self):
        assert not is_ranged_type("swords")

    def test_weapons_group_is_not_ranged(self):
        assert not is_ranged_type("weapons")


class TestProjectileType:
    def test_member(self):
        assert is_projectile_type("arrows")

    def test_group_name(self):
        assert is_projectile_type("projectiles")

    def test_ranged_is_not_projectile(self):
        assert not is_projectile_type("ranged")


class TestGroups:
    def test_is_group(self):
        assert is_group("weapons")
        assert not is_group("swords")

    def test_members(self):
        assert group_members("projectiles") == ["arrows", "missiles"]

    def test_unknown_members(self):
        assert group_members("food") == []

    def test_excluded(self):
        assert is_excluded("dummy_weapons")
        assert not is_excluded("swords")
