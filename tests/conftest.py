"""Shared fixtures for the resx_generator test suite."""

import io
from xml.sax.saxutils import escape, quoteattr

import pytest

from resx_generator.codegen.core.config import GeneratorOptions

RESX_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <xsd:schema id="root" xmlns="" xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:msdata="urn:schemas-microsoft-com:xml-msdata">
    <xsd:import namespace="http://www.w3.org/XML/1998/namespace" />
    <xsd:element name="root" msdata:IsDataSet="true">
      <xsd:complexType>
        <xsd:choice maxOccurs="unbounded">
          <xsd:element name="data">
            <xsd:complexType>
              <xsd:sequence>
                <xsd:element name="value" type="xsd:string" minOccurs="0" msdata:Ordinal="1" />
                <xsd:element name="comment" type="xsd:string" minOccurs="0" msdata:Ordinal="2" />
              </xsd:sequence>
              <xsd:attribute name="name" type="xsd:string" use="required" msdata:Ordinal="1" />
              <xsd:attribute name="type" type="xsd:string" msdata:Ordinal="3" />
              <xsd:attribute name="mimetype" type="xsd:string" msdata:Ordinal="4" />
              <xsd:attribute ref="xml:space" />
            </xsd:complexType>
          </xsd:element>
        </xsd:choice>
      </xsd:complexType>
    </xsd:element>
  </xsd:schema>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <resheader name="version">
    <value>2.0</value>
  </resheader>
  <resheader name="reader">
    <value>System.Resources.ResXResourceReader, System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089</value>
  </resheader>
  <resheader name="writer">
    <value>System.Resources.ResXResourceWriter, System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089</value>
  </resheader>
"""

RESX_FOOTER = "</root>\n"


def build_resx(*entries) -> bytes:
    """
    Build a resource document.

    Each entry is ``(name, value)``, ``(name, value, comment)`` or a dict
    with ``name``, ``value`` and optional ``comment``, ``type``, ``mimetype``.
    """
    parts = [RESX_HEADER]

    for entry in entries:
        if not isinstance(entry, dict):
            entry = dict(zip(("name", "value", "comment"), entry))

        attributes = f"name={quoteattr(entry['name'])}"
        for attribute in ("type", "mimetype"):
            if entry.get(attribute):
                attributes += f" {attribute}={quoteattr(entry[attribute])}"

        parts.append(f'  <data {attributes} xml:space="preserve">\n')
        parts.append(f"    <value>{escape(entry['value'])}</value>\n")
        if entry.get("comment") is not None:
            parts.append(f"    <comment>{escape(entry['comment'])}</comment>\n")
        parts.append("  </data>\n")

    parts.append(RESX_FOOTER)
    return "".join(parts).encode("utf-8")


@pytest.fixture
def resx():
    """Factory fixture returning resource documents as bytes."""
    return build_resx


@pytest.fixture
def resx_stream():
    """Factory fixture returning resource documents as byte streams."""

    def factory(*entries):
        return io.BytesIO(build_resx(*entries))

    return factory


@pytest.fixture
def common_messages_resx() -> bytes:
    """A resource file with one key that is not a valid identifier."""
    return build_resx(
        ("Invalid identifier {0}", "String '{0}' is not a valid identifier.")
    )


@pytest.fixture
def options():
    """Factory fixture for GeneratorOptions with test-friendly defaults."""

    def factory(**overrides):
        values = {
            "local_namespace": "App.Resources",
            "class_name": "Messages",
            "custom_tool_namespace": None,
            "public_class": False,
            "null_forgiving_operators": False,
            "static_class": True,
        }
        values.update(overrides)
        return GeneratorOptions(**values)

    return factory


@pytest.fixture
def common_messages_options() -> GeneratorOptions:
    return GeneratorOptions(
        local_namespace="VocaDb.Web.App_GlobalResources",
        custom_tool_namespace=None,
        class_name="CommonMessages",
        public_class=True,
        null_forgiving_operators=False,
        static_class=True,
    )


@pytest.fixture
def project(tmp_path, resx):
    """
    A project directory with base files, a locale variant, a nested folder,
    build output and one malformed file.
    """
    root = tmp_path / "App"
    (root / "Sub").mkdir(parents=True)
    (root / "obj" / "Debug").mkdir(parents=True)

    (root / "App.csproj").write_text(
        '<Project Sdk="Microsoft.NET.Sdk">\n'
        "  <PropertyGroup>\n"
        "    <RootNamespace>App</RootNamespace>\n"
        "  </PropertyGroup>\n"
        "</Project>\n",
        encoding="utf-8",
    )
    (root / "Messages.resx").write_bytes(resx(("Hello", "Hello"), ("Bye", "Goodbye")))
    (root / "Messages.fr.resx").write_bytes(resx(("Hello", "Bonjour")))
    (root / "Messages.Util.resx").write_bytes(resx(("Tool", "Utility")))
    (root / "Sub" / "Errors.resx").write_bytes(resx(("NotFound", "Not found")))
    (root / "obj" / "Debug" / "Stale.resx").write_bytes(resx(("Old", "Old")))
    (root / "Broken.resx").write_bytes(b"<root><data name='x'><value>oops</root>")
    (root / "readme.txt").write_text("not a resource", encoding="utf-8")

    return root
