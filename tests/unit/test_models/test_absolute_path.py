"""Tests for the AbsolutePath value type."""

from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

import pytest

from segpath.errors import AbsolutePathOutsideRootError, InvalidSegmentError, PathKindError
from segpath.models import AbsolutePath, RelativePath, rel, up


class TestConstruction:
    """Test AbsolutePath construction."""

    def test_root_from_string(self) -> None:
        """A string root is turned into a PurePath."""
        path = AbsolutePath("/", ("a",))
        assert isinstance(path.root, PurePath)
        assert path.segments == ("a",)

    def test_root_must_be_an_anchor(self) -> None:
        """A root with segments of its own is rejected."""
        with pytest.raises(ValueError, match="anchor"):
            AbsolutePath(PurePosixPath("/usr"), ())

    def test_relative_root_rejected(self) -> None:
        """A root without an anchor is rejected."""
        with pytest.raises(ValueError, match="anchor"):
            AbsolutePath(PurePosixPath("usr"), ())

    @pytest.mark.parametrize("segment", ["..", ".", "", "a/b"])
    def test_constructor_validates_segments(self, segment: str) -> None:
        """The constructor rejects normalization artifacts in segments."""
        with pytest.raises(InvalidSegmentError):
            AbsolutePath("/", ("a", segment))

    def test_constructor_rejects_bare_string(self) -> None:
        """A string is not split into one segment per character."""
        with pytest.raises(TypeError, match="sequence of strings"):
            AbsolutePath("/", "usr")  # type: ignore[arg-type]

    def test_immutable(self, home: AbsolutePath) -> None:
        """Fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            home.segments = ()  # type: ignore[misc]


class TestFromNative:
    """Test AbsolutePath.from_native."""

    def test_simple_path(self, root: PurePath) -> None:
        """An absolute path splits into root and segments."""
        path = AbsolutePath.from_native(root / "usr" / "lib")
        assert path.root == root
        assert path.segments == ("usr", "lib")

    def test_string_input(self, root: PurePath) -> None:
        """Strings are parsed with the host conventions."""
        assert AbsolutePath.from_native(str(root / "a" / "b")).segments == ("a", "b")

    def test_root_only(self, root: PurePath) -> None:
        """The root itself has no segments."""
        assert AbsolutePath.from_native(root).segments == ()

    def test_parents_fold_positionally(self, root: PurePath) -> None:
        """.. entries in absolute paths cancel the segment before them."""
        path = AbsolutePath.from_native(root / "a" / "b" / ".." / "c")
        assert path.segments == ("a", "c")

    def test_mostly_parents_rejected(self, root: PurePath) -> None:
        """More than half .. entries is outside the root."""
        with pytest.raises(AbsolutePathOutsideRootError):
            AbsolutePath.from_native(root / "a" / ".." / "..")

    def test_climbing_above_root_rejected(self, root: PurePath) -> None:
        """A leading .. climbs above the root."""
        with pytest.raises(AbsolutePathOutsideRootError):
            AbsolutePath.from_native(root / ".." / "a" / "b")

    def test_relative_input_rejected(self) -> None:
        """Relative inputs need a base."""
        with pytest.raises(PathKindError, match="not an absolute path"):
            AbsolutePath.from_native("a/b")

    def test_relative_input_with_base(self, home: AbsolutePath) -> None:
        """Relative inputs are joined onto the base."""
        assert AbsolutePath.from_native("docs/a.md", home) == AbsolutePath(
            home.root, ("home", "alice", "docs", "a.md")
        )
        assert AbsolutePath.from_native("x/../y", home).segments == ("home", "x", "y")

    def test_relative_input_with_base_stack_policy(self, home: AbsolutePath) -> None:
        """The folding policy applies to the relative part."""
        resolved = AbsolutePath.from_native("x/../y", home, policy="stack")
        assert resolved == AbsolutePath(home.root, ("home", "alice", "y"))

    def test_absolute_input_ignores_base(self, home: AbsolutePath, root: PurePath) -> None:
        """An absolute input is returned without the base."""
        assert AbsolutePath.from_native(root / "etc", home).segments == ("etc",)


class TestJoin:
    """Test AbsolutePath joining."""

    def test_appends_segments(self, home: AbsolutePath) -> None:
        """Joining without ups appends."""
        assert (home / RelativePath(0, ("docs",))).segments == ("home", "alice", "docs")

    def test_ups_consume_segments(self, home: AbsolutePath) -> None:
        """ups drop trailing segments."""
        assert (home / RelativePath(1, ("bob",))).segments == ("home", "bob")

    def test_climb_to_root(self, home: AbsolutePath) -> None:
        """Climbing exactly to the root is allowed."""
        assert (home / up / up).segments == ()

    def test_climb_past_root(self, home: AbsolutePath) -> None:
        """Climbing past the root fails."""
        with pytest.raises(AbsolutePathOutsideRootError):
            home / RelativePath(3, ())

    def test_root_preserved(self) -> None:
        """The root token survives a join."""
        drive = AbsolutePath(PureWindowsPath("D:\\"), ("data",))
        assert (drive / "x").root == PureWindowsPath("D:\\")

    def test_string_segment(self, home: AbsolutePath) -> None:
        """Strings are validated segments."""
        assert (home / "notes.md").last == "notes.md"
        with pytest.raises(InvalidSegmentError):
            home / ".."

    def test_empty_join(self, home: AbsolutePath) -> None:
        """Joining rel changes nothing."""
        assert home / rel == home


class TestRelativeTo:
    """Test AbsolutePath.relative_to."""

    def test_self(self, home: AbsolutePath) -> None:
        """A path relative to itself is empty."""
        assert home.relative_to(home) == rel

    def test_descendant(self, home: AbsolutePath) -> None:
        """Descendants need no ups."""
        target = home / "a" / "b"
        assert target.relative_to(home) == RelativePath(0, ("a", "b"))

    def test_ancestor(self, home: AbsolutePath) -> None:
        """Ancestors are reached by climbing."""
        parent = home / up
        assert parent.relative_to(home) == RelativePath(1, ())

    def test_sibling_branch(self, root: PurePath) -> None:
        """Diverging paths climb to the common prefix then descend."""
        target = AbsolutePath(root, ("a", "b", "c"))
        base = AbsolutePath(root, ("a", "x", "y"))
        assert target.relative_to(base) == RelativePath(2, ("b", "c"))

    def test_nothing_in_common(self, root: PurePath) -> None:
        """With nothing shared the whole base is climbed."""
        target = AbsolutePath(root, ("x",))
        base = AbsolutePath(root, ("a", "b"))
        assert target.relative_to(base) == RelativePath(2, ("x",))

    @pytest.mark.parametrize(
        "segments",
        [(), ("home",), ("home", "alice", "docs"), ("srv", "www"), ("home", "bob", "x")],
    )
    def test_round_trip(self, home: AbsolutePath, segments: tuple[str, ...]) -> None:
        """home / target.relative_to(home) gives target back."""
        target = AbsolutePath(home.root, segments)
        assert home / target.relative_to(home) == target

    def test_relative_base_rejected(self, home: AbsolutePath) -> None:
        """Mixing kinds is a precondition failure."""
        with pytest.raises(PathKindError):
            home.relative_to(rel)  # type: ignore[arg-type]


class TestStartsWith:
    """Test AbsolutePath.startswith."""

    def test_reflexive(self, home: AbsolutePath) -> None:
        """Every path starts with itself."""
        assert home.startswith(home)

    def test_prefix(self, home: AbsolutePath) -> None:
        """Ancestors are prefixes."""
        assert (home / "a").startswith(home)
        assert home.startswith(home / up / up)

    def test_not_prefix(self, home: AbsolutePath) -> None:
        """Descendants and siblings are not prefixes."""
        assert not home.startswith(home / "a")
        assert not home.startswith(home / up / "bob")

    def test_root_ignored(self) -> None:
        """Roots do not take part in the prefix test."""
        c = AbsolutePath(PureWindowsPath("C:\\"), ("a", "b"))
        d = AbsolutePath(PureWindowsPath("D:\\"), ("a",))
        assert c.startswith(d)


class TestEqualityAndOrdering:
    """Test AbsolutePath equality and ordering."""

    def test_equality_ignores_root(self) -> None:
        """Segment-equal paths on different roots are equal."""
        c = AbsolutePath(PureWindowsPath("C:\\"), ("a",))
        d = AbsolutePath(PureWindowsPath("D:\\"), ("a",))
        assert c == d
        assert hash(c) == hash(d)

    def test_not_equal_to_relative(self, root: PurePath) -> None:
        """An absolute path never equals a relative one."""
        assert AbsolutePath(root, ("a",)) != RelativePath(0, ("a",))

    def test_orders_by_length_then_segments(self, root: PurePath) -> None:
        """Sorting follows (len(segments), segments)."""
        paths = [
            AbsolutePath(root, ("b",)),
            AbsolutePath(root, ("a", "z")),
            AbsolutePath(root, ()),
            AbsolutePath(root, ("a",)),
        ]
        assert [p.segments for p in sorted(paths)] == [(), ("a",), ("b",), ("a", "z")]


class TestAccessorsAndRendering:
    """Test last, ext and string forms."""

    def test_last_and_ext(self, home: AbsolutePath) -> None:
        """last and ext read the final segment."""
        path = home / "report.final.pdf"
        assert path.last == "report.final.pdf"
        assert path.ext == "pdf"

    def test_last_of_root(self, root: PurePath) -> None:
        """The root has no last segment."""
        with pytest.raises(IndexError):
            AbsolutePath(root).last

    def test_str(self) -> None:
        """str renders root and segments with the native separator."""
        assert str(AbsolutePath(PurePosixPath("/"), ("usr", "lib"))) == "/usr/lib"
        assert str(AbsolutePath(PureWindowsPath("C:\\"), ("Users",))) == "C:\\Users"

    def test_to_native(self, home: AbsolutePath, root: PurePath) -> None:
        """to_native rebuilds the PurePath."""
        assert home.to_native() == root / "home" / "alice"


class TestGetHandle:
    """Test AbsolutePath.get_handle."""

    def test_reads_and_seeks(self, tmp_path: Path) -> None:
        """The handle reads bytes and can seek."""
        target = tmp_path / "data.bin"
        target.write_bytes(b"0123456789")

        with AbsolutePath.from_native(target).get_handle() as handle:
            handle.seek(4)
            assert handle.read(3) == b"456"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files surface the OS error."""
        with pytest.raises(FileNotFoundError):
            AbsolutePath.from_native(tmp_path / "missing").get_handle()
