import shutil
from pathlib import Path

import pytest

from xcode_ulinks import capability
from xcode_ulinks.capability import entitlements_relative_path, enable_capability, resolve_project_name
from xcode_ulinks.project import DescriptorNotFound, load_project
from xcode_ulinks.types import PipelineContext

FIXTURE = Path(__file__).parent / "fixtures" / "project.pbxproj"


class _FakeProject:
    def __init__(self) -> None:
        self.path = "/fake/platforms/ios/MyApp.xcodeproj/project.pbxproj"
        self.configurations = {"CFG": {"IPHONEOS_DEPLOYMENT_TARGET": "7.0"}, "CFG_comment": "Debug"}
        self.references: dict = {}
        self.saved = 0

    def build_configurations(self) -> dict:
        return self.configurations

    def file_references(self) -> dict:
        return self.references

    def add_resource_file(self, file_name: str) -> None:
        self.references["NEW"] = {"path": file_name}
        self.references["NEW_comment"] = file_name

    def save(self) -> None:
        self.saved += 1


def test_entitlements_relative_path() -> None:
    assert entitlements_relative_path("MyApp") == "MyApp/Resources/MyApp.entitlements"


def test_resolve_project_name_prefers_explicit(tmp_path) -> None:
    ctx = PipelineContext(project_root=str(tmp_path), project_name="Given")
    assert resolve_project_name(ctx) == "Given"


def test_resolve_project_name_reads_config_xml(tmp_path) -> None:
    (tmp_path / "config.xml").write_text("<widget><name>FromXml</name></widget>")
    assert resolve_project_name(PipelineContext(project_root=str(tmp_path))) == "FromXml"


def test_enable_capability_end_to_end_with_model(monkeypatch, tmp_path) -> None:
    fake = _FakeProject()
    seen: list[str] = []

    def fake_load(platform_path: str) -> _FakeProject:
        seen.append(platform_path)
        return fake

    monkeypatch.setattr(capability, "load_project", fake_load)

    enable_capability(PipelineContext(project_root=str(tmp_path), project_name="MyApp"))

    assert seen == [str(tmp_path / "platforms" / "ios")]
    assert fake.configurations["CFG"] == {
        "IPHONEOS_DEPLOYMENT_TARGET": "9.0",
        "CODE_SIGN_ENTITLEMENTS": '"MyApp/Resources/MyApp.entitlements"',
    }
    assert fake.configurations["CFG_comment"] == "Debug"
    assert fake.references["NEW"] == {"path": "MyApp.entitlements"}
    assert fake.saved == 1


def test_enable_capability_dry_run_does_not_save(monkeypatch, tmp_path, capsys) -> None:
    fake = _FakeProject()
    monkeypatch.setattr(capability, "load_project", lambda _p: fake)

    enable_capability(PipelineContext(project_root=str(tmp_path), project_name="MyApp", dry_run=True))

    assert fake.saved == 0
    assert fake.configurations["CFG"]["IPHONEOS_DEPLOYMENT_TARGET"] == "9.0"
    assert "Dry-run mode enabled" in capsys.readouterr().out


def test_enable_capability_missing_descriptor(tmp_path) -> None:
    with pytest.raises(DescriptorNotFound):
        enable_capability(PipelineContext(project_root=str(tmp_path), project_name="MyApp"))


def test_enable_capability_on_cordova_layout(tmp_path) -> None:
    (tmp_path / "config.xml").write_text(
        '<widget xmlns="http://www.w3.org/ns/widgets"><name>MyApp</name></widget>'
    )
    platform = tmp_path / "platforms" / "ios"
    (platform / "MyApp.xcodeproj").mkdir(parents=True)
    shutil.copyfile(FIXTURE, platform / "MyApp.xcodeproj" / "project.pbxproj")

    ctx = PipelineContext(project_root=str(tmp_path))
    enable_capability(ctx)
    enable_capability(ctx)

    model = load_project(str(platform))
    configs = {k: v for k, v in model.build_configurations().items() if not k.endswith("_comment")}
    assert configs["1D6058940D05DD3E006BFB54"]["IPHONEOS_DEPLOYMENT_TARGET"] == "9.0"
    assert configs["1D6058950D05DD3E006BFB54"]["IPHONEOS_DEPLOYMENT_TARGET"] == "11.0"
    assert configs["C01FCF4F08A954540054247B"]["IPHONEOS_DEPLOYMENT_TARGET"] == "9.0"
    for settings in configs.values():
        assert settings["CODE_SIGN_ENTITLEMENTS"] == '"MyApp/Resources/MyApp.entitlements"'

    refs = [
        r for k, r in model.file_references().items()
        if not k.endswith("_comment") and "MyApp.entitlements" in r.get("path", "")
    ]
    assert len(refs) == 1


def test_enable_capability_keeps_build_variable_target(tmp_path) -> None:
    platform = tmp_path / "platforms" / "ios"
    (platform / "MyApp.xcodeproj").mkdir(parents=True)
    text = FIXTURE.read_text(encoding="utf-8").replace(
        "IPHONEOS_DEPLOYMENT_TARGET = 11.0;",
        'IPHONEOS_DEPLOYMENT_TARGET = "$(RECOMMENDED_IPHONEOS_DEPLOYMENT_TARGET)";',
    )
    (platform / "MyApp.xcodeproj" / "project.pbxproj").write_text(text, encoding="utf-8")

    enable_capability(PipelineContext(project_root=str(tmp_path), project_name="MyApp"))

    configs = load_project(str(platform)).build_configurations()
    release = configs["1D6058950D05DD3E006BFB54"]
    assert release["IPHONEOS_DEPLOYMENT_TARGET"] == '"$(RECOMMENDED_IPHONEOS_DEPLOYMENT_TARGET)"'
    assert release["CODE_SIGN_ENTITLEMENTS"] == '"MyApp/Resources/MyApp.entitlements"'
    assert configs["1D6058940D05DD3E006BFB54"]["IPHONEOS_DEPLOYMENT_TARGET"] == "9.0"
