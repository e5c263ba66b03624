"""Lock-on marks over invaders in a bullet's column."""

from starraid.model import Target


def create_targets(game, bullet_index):
    """Mark every invader whose column holds the given bullet; return the new marks."""
    if bullet_index < 0:
        raise IndexError(f"bullet index {bullet_index} out of range")
    bullet = game.bullets[bullet_index]
    created = []
    for invader in game.invaders:
        box = invader.sprite
        if box.x <= bullet.x <= box.x + box.width:
            mark = game.sprites.target.moved(
                box.x - box.width // 4, box.y - box.height // 2
            )
            created.append(Target(mark, bullet_index, invader))
    game.targets.extend(created)
    return created


def update_targets(game):
    """Reposition every mark from its invader's height and return all marks."""
    for target in game.targets:
        height = target.invader.sprite.height
        target.sprite.y = height - height // 2
    return game.targets