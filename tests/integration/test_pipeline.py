from pathlib import Path
from typing import Sequence

import numpy as np
import pytest

from identicon import (
    EncodingError,
    PersistenceError,
    build,
    generate,
    main,
)
from identicon.components import Rect
from identicon.types import Color
from identicon.utils.image import decode_image
from tests.test_utils import TEXT_DIGEST, TEXT_PAINTED_INDICES, grid_pairs

WHITE = (255, 255, 255)


def test_build_text_fixture() -> None:
    image = build("text")
    assert list(image.hex) == TEXT_DIGEST
    assert image.color == (28, 178, 81)
    assert [index for _, index in grid_pairs(image)] == TEXT_PAINTED_INDICES
    assert image.pixel_map is not None
    assert len(image.pixel_map) == len(TEXT_PAINTED_INDICES)


@pytest.mark.parametrize("input", ["", "text", "alice", "ünïcødé"])
def test_pipeline_is_deterministic(input: str) -> None:
    assert build(input) == build(input)
    assert generate(input) == generate(input)


def test_generate_paints_even_cells_only() -> None:
    pixels = decode_image(generate("text"))
    assert pixels.shape == (250, 250, 3)
    for index in range(25):
        x = (index % 5) * 50 + 25
        y = (index // 5) * 50 + 25
        expected = (28, 178, 81) if index in TEXT_PAINTED_INDICES else WHITE
        assert tuple(pixels[y, x]) == expected


def test_generate_image_is_symmetric() -> None:
    pixels = decode_image(generate("alice"))
    assert (pixels == pixels[:, ::-1]).all()


def test_generate_empty_input() -> None:
    image = build("")
    assert image.color == (212, 29, 140)
    assert generate("").startswith(b"\x89PNG")


def test_generate_hands_painted_cells_to_renderer() -> None:
    def count_rects(width: int, height: int, fill: Color, rects: Sequence[Rect]) -> bytes:
        assert (width, height) == (250, 250)
        return bytes(len(rects))

    assert generate("text", count_rects) == bytes(len(TEXT_PAINTED_INDICES))


def test_generate_propagates_encoding_error() -> None:
    def failing(width: int, height: int, fill: Color, rects: Sequence[Rect]) -> bytes:
        raise EncodingError("boom")

    with pytest.raises(EncodingError):
        generate("text", failing)


def test_main_writes_input_png(tmp_path: Path) -> None:
    path = main("text", directory=str(tmp_path))
    assert Path(path) == tmp_path / "text.png"
    assert (tmp_path / "text.png").read_bytes() == generate("text")


def test_main_writes_nothing_when_rendering_fails(tmp_path: Path) -> None:
    def failing(width: int, height: int, fill: Color, rects: Sequence[Rect]) -> bytes:
        raise EncodingError("boom")

    with pytest.raises(EncodingError):
        main("text", failing, directory=str(tmp_path))
    assert list(tmp_path.iterdir()) == []


def test_main_persistence_failure(tmp_path: Path) -> None:
    with pytest.raises(PersistenceError):
        main("text", directory=str(tmp_path / "missing"))


def test_different_inputs_differ() -> None:
    a = decode_image(generate("alice"))
    b = decode_image(generate("bob"))
    assert not np.array_equal(a, b)
