"""Tests for base names, locale variants and namespace resolution."""

import pytest

from resx_generator.codegen.core.locations import (
    LocaleTagKind,
    classify_locale_tag,
    get_base_name,
    get_local_namespace,
    get_locale_tag,
    is_locale_variant,
)


class TestClassifyLocaleTag:
    """Test locale tag classification."""

    @pytest.mark.parametrize("tag", ["fr", "de-DE", "en-US", "ja", "pt-BR"])
    def test_specific_locales(self, tag):
        assert classify_locale_tag(tag) is LocaleTagKind.SPECIFIC

    @pytest.mark.parametrize("tag", ["qps-ploc", "qps-plocm", "qps-anything"])
    def test_pseudo_locales(self, tag):
        assert classify_locale_tag(tag) is LocaleTagKind.PSEUDO

    @pytest.mark.parametrize(
        "tag",
        ["Util", "Designer", "Errors", "", None, "12", "x-y-z-w", "root", "und", "UND", "und-US"],
    )
    def test_invalid_tags(self, tag):
        assert classify_locale_tag(tag) is LocaleTagKind.INVALID
        assert not classify_locale_tag(tag).is_valid


class TestBaseName:
    """Test base name detection."""

    def test_plain_file(self):
        assert get_base_name("/proj/Messages.resx") == "Messages"

    def test_locale_variant(self):
        assert get_base_name("/proj/Messages.fr.resx") == "Messages"
        assert get_base_name("/proj/Messages.de-DE.resx") == "Messages"
        assert get_base_name("/proj/Messages.qps-ploc.resx") == "Messages"

    def test_non_locale_inner_extension_is_kept(self):
        assert get_base_name("/proj/Messages.Util.resx") == "Messages.Util"

    def test_windows_paths(self):
        assert get_base_name("C:\\proj\\Sub\\Messages.fr.resx") == "Messages"

    def test_locale_tag(self):
        assert get_locale_tag("Messages.fr.resx") == "fr"
        assert get_locale_tag("Messages.Util.resx") is None
        assert get_locale_tag("Messages.resx") is None

    def test_is_locale_variant(self):
        assert is_locale_variant("/proj/Messages.fr.resx")
        assert not is_locale_variant("/proj/Messages.Util.resx")
        assert not is_locale_variant("/proj/Messages.resx")
        assert not is_locale_variant("/proj/Messages.und.resx")


class TestLocalNamespace:
    """Test namespace resolution."""

    def test_file_in_subdirectory(self):
        assert get_local_namespace("/proj/Sub/Messages.resx", None, "/proj", "App") == "App.Sub"

    def test_file_in_project_root(self):
        assert get_local_namespace("/proj/Messages.resx", None, "/proj", "App") == "App"

    def test_nested_directories(self):
        namespace = get_local_namespace(
            "/proj/Resources/Admin Pages/Messages.resx", None, "/proj", "App"
        )

        assert namespace == "App.Resources.AdminPages"

    def test_directory_comparison_ignores_case(self):
        assert get_local_namespace("/PROJ/Sub/Messages.resx", None, "/proj", "App") == "App.Sub"

    def test_sibling_with_common_prefix_is_outside(self):
        assert get_local_namespace("/project2/Messages.resx", None, "/proj", "App") == ""

    def test_file_outside_project(self):
        assert get_local_namespace("/other/Messages.resx", None, "/proj", "App") == ""

    def test_target_path_wins(self):
        namespace = get_local_namespace(
            "/elsewhere/Messages.resx", "Resources/My Strings/Messages.resx", "/proj", "App"
        )

        assert namespace == "App.Resources.MyStrings"

    def test_target_path_with_backslashes(self):
        namespace = get_local_namespace(
            "/proj/Messages.resx", "Areas\\Admin\\Messages.resx", "/proj", "App"
        )

        assert namespace == "App.Areas.Admin"

    def test_target_path_without_directory(self):
        assert get_local_namespace("/proj/Messages.resx", "Messages.resx", "/proj", "App") == "App"

    def test_blank_target_path_is_ignored(self):
        assert get_local_namespace("/proj/Sub/Messages.resx", "  ", "/proj", "App") == "App.Sub"

    def test_windows_paths(self):
        namespace = get_local_namespace(
            "C:\\src\\proj\\Sub\\Messages.resx", None, "C:\\src\\proj", "App"
        )

        assert namespace == "App.Sub"

    def test_missing_root_namespace(self):
        assert get_local_namespace("/proj/Sub/Messages.resx", None, "/proj", None) == "Sub"

    @pytest.mark.parametrize(
        "resx_path, project_dir",
        [(None, "/proj"), ("/proj/Messages.resx", None), ("", "/proj")],
    )
    def test_missing_paths_give_empty_namespace(self, resx_path, project_dir):
        assert get_local_namespace(resx_path, None, project_dir, "App") == ""

    def test_never_raises(self):
        assert get_local_namespace(42, None, "/proj", "App") == ""
