"""Tests for intake discovery helpers."""

from pathlib import Path

from adrop.utils.files import collect_images, format_kb, move_file


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x")
    return path


class TestCollectImages:
    """Tests for collect_images."""

    def test_listed_extensions_only(self, temp_dir: Path):
        for name in ["a.jpg", "b.jpeg", "c.png", "d.JPG", "e.PNG", "f.webp"]:
            touch(temp_dir / name)
        for name in ["g.JPEG", "h.WEBP", "i.gif", "j.txt", "k.Png"]:
            touch(temp_dir / name)

        found = [p.name for p in collect_images(temp_dir)]

        assert found == ["a.jpg", "b.jpeg", "c.png", "d.JPG", "e.PNG", "f.webp"]

    def test_recursive(self, temp_dir: Path):
        touch(temp_dir / "top.jpg")
        touch(temp_dir / "nested" / "deeper" / "inner.png")

        found = collect_images(temp_dir)

        assert temp_dir / "nested" / "deeper" / "inner.png" in found
        assert len(found) == 2

    def test_hidden_files_ignored(self, temp_dir: Path):
        touch(temp_dir / ".hidden.jpg")
        touch(temp_dir / ".cache" / "thumb.jpg")
        touch(temp_dir / "visible.jpg")

        assert [p.name for p in collect_images(temp_dir)] == ["visible.jpg"]

    def test_missing_directory(self, temp_dir: Path):
        assert collect_images(temp_dir / "nope") == []


class TestHelpers:
    """Tests for size formatting and moving."""

    def test_format_kb(self):
        assert format_kb(2048) == "2.00 KB"
        assert format_kb(1536) == "1.50 KB"

    def test_move_file_keeps_name(self, temp_dir: Path):
        source = touch(temp_dir / "in" / "Photo (1).JPG")
        archive = temp_dir / "archive"
        archive.mkdir()

        target = move_file(source, archive)

        assert target == archive / "Photo (1).JPG"
        assert target.exists()
        assert not source.exists()
