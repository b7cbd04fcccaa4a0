"""Tests for the PathModule call boundary."""

import pytest
import crosspath
from crosspath import Config, CrossPathError, InvalidArgument, PathModule, PlatformStyle, for_style


class TestArgumentValidation:

    @pytest.mark.parametrize("operation, args, message", [
        ("normalize", (), "path.normalize requires 1 string parameter of file path."),
        ("normalize", (1,), "path.normalize requires 1 string parameter of file path."),
        ("normalize", ("a", "b"), "path.normalize requires 1 string parameter of file path."),
        ("resolve", (), "path.resolve requires at least one string parameters."),
        ("resolve", ("a", 3), "path.resolve doesn't accept non-string argument."),
        ("join", (), "path.join requires at least one string parameters."),
        ("join", (1, "a"), "path.join requires at least one string parameters."),
        ("join", ("a", None), "path.join doesn't accept non-string argument."),
        ("dirname", (b"/a",), "path.dirname requires 1 string parameter of file path."),
        ("basename", (), "path.basename takes 1 required argument of file path and 1 optional argument of extension"),
        ("basename", ("a", "b", "c"), "path.basename takes 1 required argument of file path and 1 optional argument of extension"),
        ("basename", (1,), "path.basename requires a string parameter of file path."),
        ("basename", ("a", 2), "path.basename requires a string as 2nd parameter of extension."),
        ("extname", (None,), "path.extname requires 1 string parameter of file path."),
        ("is_absolute", (), "path.isAbsolute requires 1 string parameter of file path."),
        ("relative", ("a",), "path.relative requires 2 arguments of string type."),
        ("relative", ("a", 1), "path.relative requires 2 arguments of string type."),
    ])
    def test_invalid_arguments(self, posix, operation, args, message):
        with pytest.raises(InvalidArgument) as exc_info:
            getattr(posix, operation)(*args)
        assert str(exc_info.value) == message
        assert exc_info.value.operation == operation

    def test_invalid_argument_is_type_error(self, posix):
        with pytest.raises(TypeError):
            posix.normalize(42)

    def test_invalid_argument_is_crosspath_error(self, posix):
        with pytest.raises(CrossPathError):
            posix.join()

    def test_validation_happens_before_reading_current_directory(self):
        def forbidden():
            raise AssertionError("current directory must not be read")

        module = PathModule(Config(platform_style="posix", current_directory_provider=forbidden))
        with pytest.raises(InvalidArgument):
            module.resolve("a", 1)


class TestPureOperations:
    """Only resolve and relative consult the current directory."""

    @pytest.fixture
    def guarded(self):
        def forbidden():
            raise AssertionError("current directory must not be read")

        return PathModule(Config(platform_style="posix", current_directory_provider=forbidden))

    def test_pure_operations(self, guarded):
        assert guarded.normalize("a/../b") == "b"
        assert guarded.join("a", "b") == "a/b"
        assert guarded.dirname("a/b") == "a"
        assert guarded.basename("a/b.c", ".c") == "b"
        assert guarded.extname("a/b.c") == ".c"
        assert guarded.is_absolute("a") is False


class TestSeparator:

    def test_posix_separator(self, posix):
        assert posix.sep == "/"

    def test_windows_separator(self, windows):
        assert windows.sep == "\\"

    def test_separator_is_read_only(self, posix):
        with pytest.raises(AttributeError):
            posix.sep = "\\"


class TestModuleInstances:

    def test_ready_made_modules(self):
        assert crosspath.posix.style is PlatformStyle.POSIX
        assert crosspath.windows.style is PlatformStyle.WINDOWS
        assert crosspath.posix.join("a", "b") == "a/b"
        assert crosspath.windows.join("a", "b") == "a\\b"

    def test_default_module_separator(self):
        assert crosspath.sep == crosspath.path.sep
        assert crosspath.sep in ("/", "\\")

    def test_for_style(self):
        module = for_style("win32", current_directory_provider=lambda: "d:\\work")
        assert module.style is PlatformStyle.WINDOWS
        assert module.resolve("x") == "d:\\work\\x"

    def test_for_style_unknown(self):
        with pytest.raises(ValueError, match="Unknown platform style"):
            for_style("amiga")

    def test_repr(self, windows):
        assert repr(windows) == "PathModule(platform_style='windows')"
