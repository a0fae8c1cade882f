def follow_x(player_x: float, viewport_width: float, map_width_pixels: float) -> float:
    """Horizontal camera offset that keeps the player centred.

    Kept exactly as the level has always scrolled: the right-edge bound is
    taken as min(map_width - viewport, player_x) before clamping at 0.
    """
    return max(0, min(player_x - viewport_width / 2,
                      min(map_width_pixels - viewport_width, player_x)))
