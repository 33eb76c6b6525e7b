from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerAppearanceStats:
    player_id: str
    # batting
    ab: int = 0
    h: int = 0
    doubles: int = 0
    triples: int = 0
    hr: int = 0
    rbi: int = 0
    r: int = 0
    bb: int = 0
    so: int = 0
    hbp: int = 0
    sb: int = 0
    cs: int = 0
    sac: int = 0
    sf: int = 0
    # pitching, ip in display form (4.1 = four innings and one out)
    ip: float = 0.0
    p_h: int = 0
    p_r: int = 0
    er: int = 0
    p_bb: int = 0
    p_so: int = 0
    p_hr: int = 0
    pitch_count: int = 0
    # fielding
    po: int = 0
    a: int = 0
    e: int = 0
    # catcher only
    catcher_cs: int | None = None
    catcher_sb: int | None = None
    passed_balls: int | None = None
    pickoffs: int | None = None
