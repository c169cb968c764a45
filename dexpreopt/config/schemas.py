"""Pydantic schemas for the dex-preopt global and per-module config files."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from dexpreopt.arch import ArchType

# String element of a list or map; a JSON null element decodes to ""
ElemStr = Annotated[str, BeforeValidator(lambda v: "" if v is None else v)]


class _Record(BaseModel):
    """Base for config records: every field optional, keys matched exactly, no coercion."""

    model_config = {"extra": "ignore", "strict": True}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """A JSON null (for the whole record or one field) leaves the zero value in place."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Tools(_Record):
    """Paths to tools possibly used by the generated commands."""

    Profman: str = ""
    Dex2oat: str = ""
    Aapt: str = ""
    SoongZip: str = ""
    Zip2zip: str = ""

    VerifyUsesLibraries: str = ""
    ConstructContext: str = ""


# GlobalConfig has a field named Tools, which shadows the class inside its body
_ToolsRecord = Tools


class GlobalConfig(_Record):
    """Dex-preopt configuration set by the product (global config file)."""

    DefaultNoStripping: bool = False  # don't strip dex files by default

    DisablePreoptModules: list[ElemStr] = Field(default_factory=list, description="Modules with preopt disabled by product config")

    OnlyPreoptBootImageAndSystemServer: bool = False

    # Odex files matching PatternsOnSystemOther go to system_other; '%' denotes a prefix match
    HasSystemOther: bool = False
    PatternsOnSystemOther: list[ElemStr] = Field(default_factory=list)

    DisableGenerateProfile: bool = False

    BootJars: list[ElemStr] = Field(default_factory=list, description="Modules for jars that form the boot class path")

    RuntimeApexJars: list[ElemStr] = Field(default_factory=list)
    ProductUpdatableBootModules: list[ElemStr] = Field(default_factory=list)
    ProductUpdatableBootLocations: list[ElemStr] = Field(default_factory=list)

    SystemServerJars: list[ElemStr] = Field(default_factory=list)
    SystemServerApps: list[ElemStr] = Field(default_factory=list, description="Apps loaded into system server")
    SpeedApps: list[ElemStr] = Field(default_factory=list, description="Apps that should be speed optimized")

    # Used when a module has no dex2oat flags of its own
    PreoptFlags: list[ElemStr] = Field(default_factory=list)

    DefaultCompilerFilter: str = Field("", description="Overridden by --compiler-filter= in module dex2oat flags")
    SystemServerCompilerFilter: str = ""

    GenerateDMFiles: bool = False  # dex metadata files
    NeverAllowStripping: bool = False

    NoDebugInfo: bool = False
    AlwaysSystemServerDebugInfo: bool = False
    NeverSystemServerDebugInfo: bool = False
    AlwaysOtherDebugInfo: bool = False
    NeverOtherDebugInfo: bool = False

    MissingUsesLibraries: list[ElemStr] = Field(
        default_factory=list,
        description="Libraries that may appear in OptionalUsesLibraries but are not installed by the product",
    )

    IsEng: bool = False
    SanitizeLite: bool = False  # second phase of a SANITIZE_LITE build

    DefaultAppImages: bool = False

    Dex2oatXmx: str = ""
    Dex2oatXms: str = ""

    EmptyDirectory: str = ""

    CpuVariant: dict[ArchType, ElemStr] = Field(default_factory=dict)
    InstructionSetFeatures: dict[ArchType, ElemStr] = Field(default_factory=dict)

    # Boot image only
    DirtyImageObjects: str = ""
    PreloadedClasses: str = ""
    BootImageProfiles: list[ElemStr] = Field(default_factory=list)
    BootFlags: str = ""
    Dex2oatImageXmx: str = ""
    Dex2oatImageXms: str = ""

    Tools: _ToolsRecord = Field(default_factory=_ToolsRecord)


class ModuleConfig(_Record):
    """Per-module dex-preopt settings."""

    Name: str = ""
    DexLocation: str = Field("", description="Dex location on device")
    BuildPath: str = ""
    DexPath: str = ""
    UncompressedDex: bool = False
    HasApkLibraries: bool = False
    PreoptFlags: list[ElemStr] = Field(default_factory=list)

    ProfileClassListing: str = ""
    ProfileIsTextListing: bool = False

    EnforceUsesLibraries: bool = False
    OptionalUsesLibraries: list[ElemStr] = Field(default_factory=list)
    UsesLibraries: list[ElemStr] = Field(default_factory=list)
    LibraryPaths: dict[str, ElemStr] = Field(default_factory=dict)

    Archs: list[ArchType] = Field(default_factory=list)
    DexPreoptImages: list[ElemStr] = Field(default_factory=list)

    PreoptBootClassPathDexFiles: list[ElemStr] = Field(default_factory=list, description="File paths of boot class path files")
    PreoptBootClassPathDexLocations: list[ElemStr] = Field(default_factory=list, description="On-device locations of boot class path files")

    PreoptExtractedApk: bool = False

    NoCreateAppImage: bool = False
    ForceCreateAppImage: bool = False

    PresignedPrebuilt: bool = False

    NoStripping: bool = False
    StripInputPath: str = ""
    StripOutputPath: str = ""
