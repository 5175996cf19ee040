"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the generation pipeline (state bus pattern).

    Each stage of the pipeline receives a copy of the state, adds its own
    fields and hands it on.

    Pipeline stages and their state additions:
        - Initial: CLI options, inputdir, outputdir
        - env_check: configPath, cssOutputFile, envOK
        - sources_scan: sourceFiles, classNames
        - config_load: atomizerConfig
        - css_generate: cssContent, warnings
        - css_write: generateResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the sources to scan
        outputdir: Directory the CSS file is written to
        verbosity: Logging verbosity level (1-3)
        pattern: Glob (relative to inputdir) of files to scan
        configFile: Optional YAML/JSON config file (relative to inputdir)
        outputFile: Name of the generated CSS file
        namespace: Optional namespace for pattern rules
        helpersNS: Optional namespace for helper rules
        rtl: Right-to-left output
        banner: Text prepended to the CSS
        minify: Compact CSS output
        envOK: Environment validation passed
        configPath: Resolved config file path
        cssOutputFile: Resolved output file path
        sourceFiles: Files that were scanned
        classNames: Class names found in the sources
        atomizerConfig: Merged configuration (AtomizerConfig at runtime)
        cssContent: Generated CSS
        warnings: Ambiguous class names
        generateResult: Summary (output_file, class_count, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="**/*.html")
    configFile: Optional[str] = field(default=None)
    outputFile: str = field(default="atomic.css")
    namespace: Optional[str] = field(default=None)
    helpersNS: Optional[str] = field(default=None)
    rtl: bool = field(default=False)
    banner: str = field(default="")
    minify: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    configPath: Optional[Path] = field(default=None)
    cssOutputFile: Path = field(default=Path("/"))
    sourceFiles: List[Path] = field(default_factory=list)
    classNames: List[str] = field(default_factory=list)
    atomizerConfig: Optional[Any] = field(default=None)
    cssContent: str = field(default="")
    warnings: List[str] = field(default_factory=list)
    generateResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments
            inputdir: Directory containing source files
            outputdir: Directory for the generated CSS

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_scan,
            config_load,
            css_generate,
            css_write,
            results_report,
        )
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
