"""Pytest fixtures: sample global/module config files."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document (dict or raw text) to a file under tmp_path and return its path."""
    def _write(content, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(content, (dict, list)):
            path.write_text(json.dumps(content), encoding="utf-8")
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def global_config_file(write_json):
    """Global config with boot jars, per-arch settings and tool paths."""
    return write_json({
        "DefaultNoStripping": False,
        "DisablePreoptModules": ["Calculator"],
        "OnlyPreoptBootImageAndSystemServer": False,
        "HasSystemOther": True,
        "PatternsOnSystemOther": ["app/%", "priv-app/%"],
        "BootJars": ["core-oj", "core-libart", "framework"],
        "SystemServerJars": ["services", "wifi-service"],
        "SpeedApps": ["SystemUI"],
        "PreoptFlags": ["--runtime-arg", "-Xms64m"],
        "DefaultCompilerFilter": "quicken",
        "SystemServerCompilerFilter": "speed",
        "GenerateDMFiles": True,
        "Dex2oatXmx": "512m",
        "Dex2oatXms": "64m",
        "EmptyDirectory": "out/empty",
        "CpuVariant": {"arm": "cortex-a53", "arm64": "kryo"},
        "InstructionSetFeatures": {"arm64": "default"},
        "BootImageProfiles": ["frameworks/base/config/boot-image-profile.txt"],
        "Tools": {
            "Profman": "out/host/linux-x86/bin/profman",
            "Dex2oat": "out/host/linux-x86/bin/dex2oatd",
            "SoongZip": "out/soong/host/linux-x86/bin/soong_zip",
        },
    }, name="dexpreopt.config")


@pytest.fixture
def module_config_file(write_json):
    """Module config for an app with shared libraries and two architectures."""
    return write_json({
        "Name": "Calendar",
        "DexLocation": "/system/app/Calendar/Calendar.apk",
        "BuildPath": "out/target/common/obj/APPS/Calendar_intermediates/Calendar.apk",
        "DexPath": "out/target/common/obj/APPS/Calendar_intermediates/classes.dex",
        "UncompressedDex": True,
        "EnforceUsesLibraries": True,
        "OptionalUsesLibraries": ["org.apache.http.legacy"],
        "UsesLibraries": ["android.test.base"],
        "LibraryPaths": {"android.test.base": "out/target/common/obj/JAVA_LIBRARIES/android.test.base.jar"},
        "Archs": ["arm64", "arm"],
        "DexPreoptImages": ["out/target/product/generic/dex_bootjars/system/framework/arm64/boot.art"],
        "NoStripping": False,
        "StripInputPath": "in.apk",
        "StripOutputPath": "out.apk",
    }, name="dexpreopt_module.config")
