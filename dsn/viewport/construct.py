from dsn.viewport.clef import (
    PanTo,
    SetTransform,
    ViewportResize,
    ZoomAt,
)

from utils import bounded

from dsn.viewport.structure import ViewportStructure
from dsn.viewport.utils import (
    clamp_translation,
    zoomed_scale,
    zoomed_translation,
    MAX_SCALE,
    MIN_SCALE,
)


def play_viewport_note(note, structure):
    """Returns (new structure, hit_edge); hit_edge expresses that a requested translation was clamped."""

    if isinstance(note, ViewportResize):
        size = (note.width, note.height) if note.width > 0 and note.height > 0 else None

        return ViewportStructure(
            structure.scale, structure.translate_x, structure.translate_y, size), False

    if isinstance(note, SetTransform):
        return ViewportStructure(
            structure.scale if note.scale is None else bounded(note.scale, MIN_SCALE, MAX_SCALE),
            structure.translate_x if note.translate_x is None else note.translate_x,
            structure.translate_y if note.translate_y is None else note.translate_y,
            structure.size), False

    if not structure.has_surface():
        # Clamping is relative to the surface; without one there is nothing meaningful we can do.
        return structure, False

    width, height = structure.size

    if isinstance(note, ZoomAt):
        new_scale = zoomed_scale(structure.scale, note.delta)

        translate_x, translate_y, hit_edge = clamp_translation(
            zoomed_translation(note.screen_x, structure.translate_x, structure.scale, new_scale),
            zoomed_translation(note.screen_y, structure.translate_y, structure.scale, new_scale),
            new_scale, width, height)

        return ViewportStructure(new_scale, translate_x, translate_y, structure.size), hit_edge

    elif isinstance(note, PanTo):
        translate_x, translate_y, hit_edge = clamp_translation(
            note.translate_x, note.translate_y, structure.scale, width, height)

        return ViewportStructure(structure.scale, translate_x, translate_y, structure.size), hit_edge

    raise Exception("Illegal note (programming error): %s" % note)
