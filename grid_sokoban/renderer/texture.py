import logging
import os
from functools import lru_cache
from typing import Callable, Dict, Optional, Tuple

from PIL import Image, ImageDraw

from grid_sokoban.components.properties.appearance import AppearanceName
from grid_sokoban.state import State
from grid_sokoban.utils.render import render_items, status_text

logger = logging.getLogger(__name__)


DEFAULT_RESOLUTION = 640
DEFAULT_ASSET_ROOT = "assets"
STATUS_BAR_PERCENT = 0.5  # of one cell

TexLookupFn = Callable[[AppearanceName, int], Image.Image]
TextureMap = Dict[AppearanceName, str]


SOKOBAN_TEXTURE_MAP: TextureMap = {
    AppearanceName.FLOOR: "images/floor.png",
    AppearanceName.WALL: "images/wall.png",
    AppearanceName.BOX: "images/box.png",
    AppearanceName.TARGET: "images/box_spot.png",
    AppearanceName.PLAYER: "images/player.png",
}

KENNEY_TEXTURE_MAP: TextureMap = {
    AppearanceName.FLOOR: "kenney/tiles/brickGrey.png",
    AppearanceName.WALL: "kenney/tiles/brickBrown.png",
    AppearanceName.BOX: "kenney/tiles/boxCrate.png",
    AppearanceName.TARGET: "kenney/tiles/signExit.png",
    AppearanceName.PLAYER: "kenney/animated_characters/male_adventurer/maleAdventurer_idle.png",
}

DEFAULT_TEXTURE_MAP: TextureMap = SOKOBAN_TEXTURE_MAP

TEXTURE_MAP_REGISTRY: Dict[str, TextureMap] = {
    "sokoban": SOKOBAN_TEXTURE_MAP,
    "kenney": KENNEY_TEXTURE_MAP,
}

FALLBACK_COLORS: Dict[AppearanceName, Tuple[int, int, int, int]] = {
    AppearanceName.NONE: (255, 0, 255, 255),
    AppearanceName.FLOOR: (222, 214, 196, 255),
    AppearanceName.WALL: (120, 72, 48, 255),
    AppearanceName.BOX: (196, 140, 64, 255),
    AppearanceName.TARGET: (200, 40, 40, 255),
    AppearanceName.PLAYER: (48, 96, 200, 255),
}


@lru_cache(maxsize=256)
def load_texture(path: str, size: int) -> Optional[Image.Image]:
    try:
        return Image.open(path).convert("RGBA").resize((size, size))
    except (FileNotFoundError, OSError):
        return None


@lru_cache(maxsize=256)
def fallback_texture(name: AppearanceName, size: int) -> Image.Image:
    """Flat placeholder sprite used when no asset file is available."""
    tex = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(tex)
    color = FALLBACK_COLORS.get(name, FALLBACK_COLORS[AppearanceName.NONE])
    inset = max(1, size // 8)
    box = (inset, inset, size - 1 - inset, size - 1 - inset)
    if name in (AppearanceName.FLOOR, AppearanceName.WALL, AppearanceName.NONE):
        draw.rectangle((0, 0, size - 1, size - 1), fill=color)
    elif name == AppearanceName.BOX:
        draw.rectangle(box, fill=color, outline=(90, 60, 20, 255))
    elif name == AppearanceName.TARGET:
        draw.ellipse(box, outline=color, width=max(1, size // 10))
    else:
        draw.ellipse(box, fill=color)
    return tex


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    texture_map: Optional[TextureMap] = None,
    asset_root: str = DEFAULT_ASSET_ROOT,
    tex_lookup_fn: Optional[TexLookupFn] = None,
    show_status: bool = True,
) -> Image.Image:
    """
    Renders the state as a PIL Image, drawing sprites in layer order with an
    optional status bar (phase and move count) under the board.
    """
    cell_size: int = max(1, resolution // state.width)

    if texture_map is None:
        texture_map = DEFAULT_TEXTURE_MAP

    def default_get_tex(name: AppearanceName, size: int) -> Image.Image:
        path = texture_map.get(name)
        if path:
            texture = load_texture(os.path.join(asset_root, path), size)
            if texture is not None:
                return texture
        return fallback_texture(name, size)

    tex_lookup = tex_lookup_fn or default_get_tex

    width, height = image_size(state.width, state.height, cell_size, show_status)
    img = Image.new("RGBA", (width, height), (242, 242, 242, 255))

    for item in render_items(state):
        tex = tex_lookup(item.sprite, cell_size)
        img.alpha_composite(tex, (item.position.x * cell_size, item.position.y * cell_size))

    if show_status:
        draw = ImageDraw.Draw(img)
        draw.text(
            (cell_size // 8, state.height * cell_size + cell_size // 8),
            status_text(state),
            fill=(0, 0, 0, 255),
        )

    return img


def image_size(
    grid_width: int, grid_height: int, cell_size: int, show_status: bool
) -> Tuple[int, int]:
    """Pixel size (width, height) of a rendered board."""
    status_height = int(cell_size * STATUS_BAR_PERCENT) if show_status else 0
    return grid_width * cell_size, grid_height * cell_size + status_height


class TextureRenderer:
    resolution: int
    texture_map: TextureMap
    asset_root: str
    tex_lookup_fn: Optional[TexLookupFn]
    show_status: bool

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        texture_map: Optional[TextureMap] = None,
        asset_root: str = DEFAULT_ASSET_ROOT,
        tex_lookup_fn: Optional[TexLookupFn] = None,
        show_status: bool = True,
    ):
        self.resolution = resolution
        self.texture_map = texture_map or DEFAULT_TEXTURE_MAP
        self.asset_root = asset_root
        self.tex_lookup_fn = tex_lookup_fn
        self.show_status = show_status
        if not os.path.isdir(asset_root):
            logger.debug("Asset root %r not found, using placeholder sprites", asset_root)

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            texture_map=self.texture_map,
            asset_root=self.asset_root,
            tex_lookup_fn=self.tex_lookup_fn,
            show_status=self.show_status,
        )
