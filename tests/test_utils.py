"""Tests for project and resource file discovery."""

import pytest

from resx_generator.utils import (
    ProjectFileError,
    find_project_file,
    find_resource_files,
    load_project_settings,
)


class TestFindResourceFiles:
    """Test resource file discovery."""

    def test_finds_sorted_files_outside_build_output(self, project):
        files = find_resource_files(project)

        assert [path.relative_to(project).as_posix() for path in files] == [
            "Broken.resx",
            "Messages.Util.resx",
            "Messages.fr.resx",
            "Messages.resx",
            "Sub/Errors.resx",
        ]

    def test_skips_bin_directory(self, tmp_path):
        (tmp_path / "bin" / "Release").mkdir(parents=True)
        (tmp_path / "bin" / "Release" / "Copied.resx").write_text("<root />")
        (tmp_path / "Strings.resx").write_text("<root />")

        assert find_resource_files(tmp_path) == [tmp_path / "Strings.resx"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_resource_files(tmp_path / "missing")


class TestFindProjectFile:
    """Test project file lookup."""

    def test_directory(self, project):
        assert find_project_file(project) == project / "App.csproj"

    def test_file(self, project):
        assert find_project_file(project / "App.csproj") == project / "App.csproj"

    def test_directory_without_project(self, tmp_path):
        assert find_project_file(tmp_path) is None

    def test_missing_path(self, tmp_path):
        assert find_project_file(tmp_path / "nope") is None

    def test_multiple_projects_picks_first(self, tmp_path):
        (tmp_path / "B.csproj").write_text("<Project />")
        (tmp_path / "A.csproj").write_text("<Project />")

        assert find_project_file(tmp_path) == tmp_path / "A.csproj"


class TestLoadProjectSettings:
    """Test reading MSBuild project files."""

    def test_sdk_style_project(self, tmp_path):
        project_file = tmp_path / "Web.csproj"
        project_file.write_text(
            """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <RootNamespace>VocaDb.Web</RootNamespace>
    <ResXFileCodeGenerator_PublicClass>true</ResXFileCodeGenerator_PublicClass>
    <ResXFileCodeGenerator_NullForgivingOperators>true</ResXFileCodeGenerator_NullForgivingOperators>
    <ResXFileCodeGenerator_StaticClass>false</ResXFileCodeGenerator_StaticClass>
  </PropertyGroup>
  <ItemGroup>
    <EmbeddedResource Update="App_GlobalResources\\CommonMessages.resx">
      <CustomToolNamespace>VocaDb.Web.Resources</CustomToolNamespace>
      <PublicClass>false</PublicClass>
    </EmbeddedResource>
    <EmbeddedResource Update="Strings.resx" StaticClass="true" TargetPath="Texts\\Strings.resx" />
    <EmbeddedResource Include="Data\\blob.bin" />
  </ItemGroup>
</Project>
""",
            encoding="utf-8",
        )

        settings = load_project_settings(project_file)

        assert settings["project_dir"] == str(tmp_path.resolve())
        assert settings["root_namespace"] == "VocaDb.Web"
        assert settings["public_class"] == "true"
        assert settings["null_forgiving_operators"] == "true"
        assert settings["static_class"] == "false"
        assert settings["files"] == {
            "App_GlobalResources/CommonMessages.resx": {
                "custom_tool_namespace": "VocaDb.Web.Resources",
                "public_class": "false",
            },
            "Strings.resx": {"target_path": "Texts\\Strings.resx", "static_class": "true"},
        }

    def test_legacy_project_with_namespace(self, tmp_path):
        project_file = tmp_path / "Legacy.csproj"
        project_file.write_text(
            '<Project ToolsVersion="15.0" '
            'xmlns="http://schemas.microsoft.com/developer/msbuild/2003">'
            "<PropertyGroup><RootNamespace>Old.App</RootNamespace></PropertyGroup>"
            "</Project>",
            encoding="utf-8",
        )

        assert load_project_settings(project_file)["root_namespace"] == "Old.App"

    def test_root_namespace_defaults_to_project_name(self, tmp_path):
        project_file = tmp_path / "Tools.csproj"
        project_file.write_text("<Project><PropertyGroup /></Project>")

        settings = load_project_settings(project_file)

        assert settings["root_namespace"] == "Tools"
        assert settings["files"] == {}

    def test_malformed_project(self, tmp_path):
        project_file = tmp_path / "Bad.csproj"
        project_file.write_text("<Project>")

        with pytest.raises(ProjectFileError, match="Invalid project file"):
            load_project_settings(project_file)

    def test_missing_project(self, tmp_path):
        with pytest.raises(ProjectFileError):
            load_project_settings(tmp_path / "Missing.csproj")
