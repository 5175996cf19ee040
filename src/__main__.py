#!/usr/bin/env python3
"""
atomizer - Atomic CSS generator

Scans markup for atomic class names and writes the CSS that backs them.

Follows the ChRIS "plugin" convention: an input directory is read, an
output directory is written.

Usage:
    atomizer inputdir/ outputdir/ [--pattern '**/*.html'] [--config atomizer.yaml]

Examples:
    # Scan every HTML file under src/, write out/atomic.css
    atomizer src/ out/

    # Scan templates, use breakpoints and custom values from a config file
    atomizer . out/ --pattern 'templates/**/*.jinja' --config atomizer.yaml

    # Right-to-left output, namespaced, verbose
    atomizer . out/ --rtl --namespace '#atomic' -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

import yaml
from chris_plugin import chris_plugin

from . import __version__
from .lib import Atomizer, AtomizerError, LOG, state_connectToLogger
from .models import AtomizerConfig, CssOptions, ProgramState, pipeline


parser = ArgumentParser(
    description="atomizer - generate atomic CSS from the class names used in your markup",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern", default="**/*.html", type=str, help="Glob (relative to inputdir) of files to scan"
)

parser.add_argument(
    "--config",
    dest="configFile",
    default=None,
    type=str,
    help="YAML or JSON config file with classNames, custom and breakPoints (relative to inputdir)",
)

parser.add_argument(
    "--outputFile", default="atomic.css", type=str, help="Name of the generated CSS file"
)

parser.add_argument("--namespace", default=None, type=str, help="Selector to nest pattern rules under")

parser.add_argument("--helpersNS", default=None, type=str, help="Selector to nest helper rules under")

parser.add_argument("--rtl", action="store_true", help="Generate right-to-left CSS")

parser.add_argument("--banner", default="", type=str, help="Text prepended to the generated CSS")

parser.add_argument("--minify", action="store_true", help="Generate compact CSS")

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Returns:
        ProgramState with configPath, cssOutputFile and envOK set

    Exits:
        1 if the input directory or the config file is missing
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    if not state.inputdir or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    if state.configFile:
        state.configPath = state.inputdir / state.configFile
        if not state.configPath.exists():
            print(f"Error: Config file not found: {state.configPath}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        LOG(f"Config file: {state.configPath}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.cssOutputFile = state.outputdir / state.outputFile
    LOG(f"Output file: {state.cssOutputFile}", level=2)

    state.envOK = True
    return state


def sources_scan(inputstate: ProgramState) -> ProgramState:
    """
    Read every file matching the pattern and collect atomic class names.

    Returns:
        ProgramState with sourceFiles and classNames set

    Exits:
        1 if a file cannot be read
    """
    state = inputstate.copy()
    atomizer = Atomizer()

    state.sourceFiles = sorted(path for path in state.inputdir.glob(state.pattern) if path.is_file())
    LOG(f"Scanning {len(state.sourceFiles)} files matching {state.pattern}", level=1)

    found: dict[str, None] = {}
    for path in state.sourceFiles:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading {path}: {e}", file=sys.stderr)
            sys.exit(1)
        classNames = atomizer.classNames_find(source)
        LOG(f"{path.name}: {len(classNames)} class names", level=3)
        found.update(dict.fromkeys(classNames))

    state.classNames = list(found)
    LOG(f"Found {len(state.classNames)} class names", level=2)
    return state


def config_load(inputstate: ProgramState) -> ProgramState:
    """
    Load the optional config file and merge the class names found.

    Returns:
        ProgramState with atomizerConfig set

    Exits:
        1 if the config file is not valid YAML/JSON, not a mapping, or
          holds a classNames entry that is not a list
    """
    state = inputstate.copy()
    data = {}

    if state.configPath:
        try:
            data = yaml.safe_load(state.configPath.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            print(f"Error: Failed to parse {state.configPath}: {e}", file=sys.stderr)
            sys.exit(1)
        if not isinstance(data, dict):
            print(f"Error: {state.configPath} must contain a mapping", file=sys.stderr)
            sys.exit(1)

    try:
        state.atomizerConfig = Atomizer().config_get(state.classNames, AtomizerConfig.config_fromDict(data))
    except TypeError as e:
        print(f"Error: {state.configPath}: {e}", file=sys.stderr)
        sys.exit(1)
    LOG(f"{len(state.atomizerConfig.classNames)} class names to generate", level=2)
    return state


def css_generate(inputstate: ProgramState) -> ProgramState:
    """
    Generate the CSS for the merged config.

    Returns:
        ProgramState with cssContent and warnings set

    Exits:
        1 if the config is rejected or the CSS cannot be compiled
    """
    state = inputstate.copy()

    LOG("Generating CSS...", level=1)

    atomizer = Atomizer(verbose=state.verbosity >= 2)
    options = CssOptions(
        namespace=state.namespace,
        helpersNS=state.helpersNS,
        rtl=state.rtl,
        banner=state.banner,
        minify=state.minify,
    )
    try:
        state.cssContent = atomizer.css_get(state.atomizerConfig, options)
    except (AtomizerError, TypeError) as e:
        print(f"Generation error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    state.warnings = atomizer.warnings
    return state


def css_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the generated CSS to the output file.

    Returns:
        ProgramState with generateResult set
    """
    state = inputstate.copy()

    state.cssOutputFile.write_text(state.cssContent, encoding="utf-8")
    LOG(f"Wrote {state.cssOutputFile}", level=2)

    state.generateResult = {
        "status": True,
        "output_file": str(state.cssOutputFile),
        "class_count": len(state.atomizerConfig.classNames) - len(state.warnings),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the generation.

    Exits:
        1 if generateResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.generateResult:
        print("Error: Generation failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Generation successful!", level=1)
    LOG(f"  Output: {state.generateResult['output_file']}", level=1)
    LOG(f"  Classes: {state.generateResult['class_count']}", level=1)
    if state.warnings:
        LOG(f"  Ambiguous: {', '.join(state.warnings)}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="atomizer - Atomic CSS generator",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - generate atomic CSS for the sources in inputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. sources_scan: Find class names in the sources
        3. config_load: Merge them with the config file
        4. css_generate: Generate the CSS
        5. css_write: Write it to outputdir
        6. results_report: Display results
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, sources_scan, config_load, css_generate, css_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
