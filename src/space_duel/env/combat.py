import logging

from .craft import Craft
from .event import Event, EventType

log = logging.getLogger(__name__)


def fire(craft: Craft) -> Event | None:
    """
    Spawn a bullet at the craft's muzzle.

    Firing with a full magazine is silently ignored.

    Returns:
        A FIRE event, or None when nothing was fired.
    """
    if craft.bullets.is_full:
        return None

    muzzle = craft.muzzle()
    craft.bullets.add_bullet(muzzle.real, muzzle.imag)
    return Event(EventType.FIRE, source=craft.side)


def advance_bullets(shooter: Craft, target: Craft, world_width: float) -> list[Event]:
    """
    Move the shooter's bullets one tick and resolve hits against `target`.

    Every bullet is evaluated against the same snapshot before any is
    removed. Bullets leaving the arena are discarded without a collision
    check; bullets overlapping the target are discarded and deal one
    point of damage each.

    Returns:
        One HIT event per bullet that struck the target.
    """
    bullets = shooter.bullets
    if len(bullets) == 0:
        return []

    direction = shooter.side.fire_direction
    bullets.advance(direction * shooter.config.bullet_velocity)

    x = bullets.x[: bullets.num_active]
    if direction > 0:
        off_screen = x > world_width
    else:
        off_screen = x < 0

    hit = ~off_screen & bullets.hits(target.rect)
    bullets.retain(~(off_screen | hit))

    events = []
    for _ in range(int(hit.sum())):
        target.damage_craft(1)
        events.append(
            Event(EventType.HIT, source=shooter.side, target=target.side, amount=target.health)
        )
        log.debug(f"{shooter.side} hit {target.side}, health now {target.health}")

    return events
