from dataclasses import dataclass


@dataclass
class StatusBarState:
    moves: int = 0
    crystallized: int = 0
    message: str = ""

    @classmethod
    def from_session(cls, session) -> "StatusBarState":
        return cls(moves=session.move_count, crystallized=session.crystallized, message=session.message)

    def labels(self):
        return [
            ("MOVES", f"{self.moves:03d}"),
            ("CRYSTALLIZED", f"{self.crystallized:03d}"),
        ]


def render_status_bar(screen, origin_xy: tuple[int, int], width: int, height: int, state: StatusBarState) -> None:
    """
    Draw a one-line status bar: counters on the left, status message after.
    Does not touch the session.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, max(12, height * 2 // 3))

    def label(x, text, color=(220, 220, 220)):
        img = font.render(text, True, color)
        screen.blit(img, (ox + x, oy + (height - img.get_height()) // 2))
        return x + img.get_width() + (height // 2)

    x = height // 2
    for name, value in state.labels():
        x = label(x, name, (150, 160, 180))
        x = label(x, value)
    label(x, state.message, (120, 255, 200))
