"""Tests for world seeding, resize and the per-frame tick."""
from __future__ import annotations

import random
from collections import Counter

import pytest

import config
from creature.creature import Creature
from creature.kinds import CreatureType
from world.food import Food, FoodField
from world.world import World, seed_types

RED, GREEN, BLUE = CreatureType.RED, CreatureType.GREEN, CreatureType.BLUE


def quiet_world(*creatures: Creature, w: float = 1000, h: float = 1000) -> World:
    """World that never spawns food on its own."""
    return World(
        w=w,
        h=h,
        creatures=list(creatures),
        food=FoodField(spawn_chance=0.0),
        rng=random.Random(1),
    )


def still(type: CreatureType, x: float, y: float, **kw) -> Creature:
    return Creature(type=type, x=x, y=y, vx=0.0, vy=0.0, **kw)


# --- seeding ---


def test_seed_types_split_in_thirds() -> None:
    types = seed_types(90)
    assert types[:30] == [RED] * 30
    assert types[30:60] == [GREEN] * 30
    assert types[60:] == [BLUE] * 30


def test_seed_types_uneven_count() -> None:
    assert Counter(seed_types(10)) == {RED: 4, GREEN: 3, BLUE: 3}


def test_create_places_population_in_bounds() -> None:
    world = World.create(400, 300, seed=9)
    assert len(world.creatures) == config.INITIAL_COUNT
    for c in world.creatures:
        assert 0 <= c.x < 400 and 0 <= c.y < 300
        assert c.speed == config.BASE_SPEED
        assert abs(c.vx) <= config.BASE_SPEED / 2
        assert abs(c.vy) <= config.BASE_SPEED / 2


def test_create_is_reproducible_with_seed() -> None:
    a = World.create(400, 300, seed=42)
    b = World.create(400, 300, seed=42)
    assert [(c.x, c.y, c.vx, c.vy) for c in a.creatures] == [(c.x, c.y, c.vx, c.vy) for c in b.creatures]
    for _ in range(20):
        a.tick()
        b.tick()
    assert [(c.x, c.y) for c in a.creatures] == [(c.x, c.y) for c in b.creatures]


@pytest.mark.parametrize("w,h", [(0, 100), (100, -1)])
def test_create_rejects_bad_bounds(w, h) -> None:
    with pytest.raises(ValueError):
        World.create(w, h)


# --- resize ---


def test_resize_keeps_positions() -> None:
    c = still(RED, 700, 500)
    world = quiet_world(c)
    world.resize(200, 100)
    assert (world.w, world.h) == (200, 100)
    assert (c.x, c.y) == (700, 500)


def test_resize_rejects_bad_bounds() -> None:
    world = quiet_world()
    with pytest.raises(ValueError):
        world.resize(0, 0)


def test_outside_creature_bounces_after_resize() -> None:
    c = Creature(type=RED, x=700, y=50, vx=1.0, vy=0.0)
    world = quiet_world(c)
    world.resize(200, 100)
    world.tick()
    assert c.vx == -1.0


# --- tick ---


def test_food_on_creature_is_eaten_first_tick() -> None:
    c = still(GREEN, 300, 300)
    pellet = Food(300, 300)
    world = quiet_world(c)
    world.food.pellets.append(pellet)

    report = world.tick()

    assert report.eaten == 1
    assert pellet not in world.food.pellets
    assert c.energy == pytest.approx(100 + config.FOOD_ENERGY - config.ENERGY_DECAY)


def test_contested_food_goes_to_first_creature() -> None:
    first = still(RED, 300, 300)
    second = still(RED, 302, 300, cooldown=50)
    world = quiet_world(first, second)
    world.food.pellets.append(Food(301, 300))

    world.tick()

    assert first.energy > second.energy
    assert len(world.food) == 0


def test_food_spawns_and_respects_cap() -> None:
    world = World(w=300, h=300, food=FoodField(spawn_chance=1.0), rng=random.Random(4))
    for _ in range(config.MAX_FOOD + 10):
        world.tick()
        assert len(world.food) <= config.MAX_FOOD
    assert len(world.food) == config.MAX_FOOD


def test_tick_breeds_once_per_pair() -> None:
    a = still(RED, 100, 100)
    b = still(RED, 104, 100)
    world = quiet_world(a, b)

    report = world.tick()

    assert report.births == 1
    assert len(world.creatures) == 3
    assert world.births == 1
    for parent in (a, b):
        assert parent.cooldown == config.REPRO_COOLDOWN
        assert parent.energy == pytest.approx(100 - config.ENERGY_DECAY - config.REPRO_COST)


def test_newborn_breeds_in_the_frame_it_is_born() -> None:
    a = still(RED, 100, 100)
    b = still(RED, 104, 100)
    d = still(RED, 101, 100)
    world = quiet_world(a, b, d)

    report = world.tick()

    # a x b breeds first; its child lands 1 unit from d, both still free
    assert report.births == 2
    assert world.births == 2
    assert len(world.creatures) == 5
    first_child = world.creatures[3]
    assert (first_child.x, first_child.y) == (100, 100)
    assert first_child.cooldown == config.REPRO_COOLDOWN
    assert d.cooldown == config.REPRO_COOLDOWN
    assert d.energy == pytest.approx(100 - config.ENERGY_DECAY - config.REPRO_COST)


def test_newborn_is_bounded_by_cap_in_same_frame() -> None:
    a = still(RED, 100, 100)
    b = still(RED, 104, 100)
    d = still(RED, 101, 100)
    world = quiet_world(a, b, d)
    world.max_creatures = 4

    report = world.tick()

    assert report.births == 1
    assert len(world.creatures) == 4
    assert d.cooldown == 0


def test_population_never_exceeds_cap() -> None:
    crowd = [still(RED, 500, 500) for _ in range(40)]
    world = quiet_world(*crowd)
    world.max_creatures = 50
    peak = 0
    for _ in range(300):
        world.tick()
        peak = max(peak, len(world.creatures))
        assert len(world.creatures) <= 50
    assert peak == 50


def test_faded_creatures_are_removed() -> None:
    dying = still(BLUE, 200, 200, energy=0.0, alpha=0.01)
    healthy = still(GREEN, 600, 600)
    world = quiet_world(dying, healthy)

    report = world.tick()

    assert report.deaths == 1
    assert world.deaths == 1
    assert world.creatures == [healthy]


def fade_frames() -> int:
    """Frames a creature fades for before alpha reaches zero."""
    alpha, frames = 1.0, 0
    while alpha > 0:
        alpha -= config.FADE_STEP
        frames += 1
    return frames


def test_lonely_creature_fades_out_on_schedule() -> None:
    c = still(GREEN, 500, 500)
    world = quiet_world(c)
    ticks = 0
    while world.creatures:
        world.tick()
        ticks += 1
        if ticks <= 2000:
            assert c.alpha == 1.0
        elif ticks == 2001:
            assert c.alpha < 1.0
    # full alpha through tick 2000, fading from tick 2001 on
    assert fade_frames() in (50, 51)
    assert ticks == 2000 + fade_frames()
    assert world.tick_count == ticks
    assert world.deaths == 1


def test_tick_counter_and_stats() -> None:
    world = quiet_world(still(RED, 100, 100), still(BLUE, 800, 800))
    world.food.pellets.append(Food(900, 10))
    world.tick()
    stats = world.stats()
    assert stats.tick == 1
    assert stats.total == 2
    assert stats.food == 1
    assert stats.counts == {RED: 1, GREEN: 0, BLUE: 1}
