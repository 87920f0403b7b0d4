"""
Build script for marimo apps.

This script exports marimo apps to HTML/WebAssembly format and generates
an index.html file that lists them. Apps import helpers from modules/;
those imports are replaced by the helper source before export so each
exported app is self-contained.

The script can be run from the command line with optional arguments:
    uv run .github/scripts/build.py [--output-dir OUTPUT_DIR] [--template TEMPLATE]

The exported files will be placed in the specified output directory (default: _site).
"""

# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "jinja2==3.1.3",
#     "fire==0.7.0",
#     "loguru==0.7.0"
# ]
# ///

import re
import subprocess
from pathlib import Path
from typing import List, Set, Union

import fire
import jinja2
from loguru import logger

# from modules.x.y import z   /   from modules.x.y import (\n z,\n)
_FROM_IMPORT = re.compile(
    r"^(?P<indent>[ \t]*)from\s+(?P<module>modules\.[\w.]+)\s+import\s+"
    r"(?:\([^)]*\)|[^\n(]+)[ \t]*\n",
    flags=re.MULTILINE,
)
# import modules.x.y
_PLAIN_IMPORT = re.compile(r"^[ \t]*import\s+(modules\.[\w.]+)", flags=re.MULTILINE)


def module_file(module_name: str, root: Path) -> Path:
    """Map a dotted modules.* name to its source file under root."""
    return root / f"{module_name.replace('.', '/')}.py"


def find_imported_modules(notebook_path: Path) -> Set[str]:
    """Find all modules imported from 'modules.*' in the notebook."""
    with open(notebook_path, "r", encoding="utf-8") as f:
        content = f.read()

    imports = {m.group("module") for m in _FROM_IMPORT.finditer(content)}
    imports.update(_PLAIN_IMPORT.findall(content))
    return imports


def _indent(code: str, indent: str) -> str:
    lines = [f"{indent}{line}" if line.strip() else "" for line in code.split("\n")]
    return "\n".join(lines).rstrip() + "\n"


def _inline_source(
    module_name: str, root: Path, indent: str, inlined: Set[str]
) -> Union[str, None]:
    """Source of module_name (and its modules.* deps), indented, or None if missing."""
    if module_name in inlined:
        return ""

    path = module_file(module_name, root)
    if not path.exists():
        logger.warning(f"Module file not found: {path}")
        return None

    with open(path, "r", encoding="utf-8") as f:
        code = f.read()
    inlined.add(module_name)

    parts = []
    missing: Set[str] = set()
    for dep in (m.group("module") for m in _FROM_IMPORT.finditer(code)):
        dep_code = _inline_source(dep, root, indent, inlined)
        if dep_code is None:
            missing.add(dep)
        elif dep_code:
            parts.append(dep_code)

    # inlined deps are pasted above, drop their import lines; keep unknown ones
    code = _FROM_IMPORT.sub(
        lambda m: m.group(0) if m.group("module") in missing else "", code
    )
    parts.append(f"{indent}# --- inlined from {module_name} ---\n" + _indent(code, indent))
    return "\n".join(parts)


def inline_modules(notebook_path: Path, output_path: Path, root: Path) -> None:
    """Write a copy of the notebook with modules.* imports replaced by their source."""
    with open(notebook_path, "r", encoding="utf-8") as f:
        notebook_code = f.read()

    required = find_imported_modules(notebook_path)
    if not required:
        logger.info(f"No modules to inline for {notebook_path.name}")
    else:
        logger.info(
            f"Inlining {len(required)} modules for {notebook_path.name}: {sorted(required)}"
        )

    inlined: Set[str] = set()

    def replace(match: re.Match) -> str:
        code = _inline_source(match.group("module"), root, match.group("indent"), inlined)
        if code is None:
            # Unknown module, keep the import as written
            return match.group(0)
        return code

    notebook_code = _FROM_IMPORT.sub(replace, notebook_code)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(notebook_code)

    logger.info(f"Successfully inlined modules into {output_path}")


def export_html_wasm(notebook_path: Path, output_dir: Path, as_app: bool = False) -> bool:
    """Export a single marimo notebook to HTML/WebAssembly format.

    Apps are exported in "run" mode with code hidden, after their modules.*
    imports have been inlined. Notebooks are exported in "edit" mode.

    Args:
        notebook_path (Path): Path to the marimo notebook (.py file) to export
        output_dir (Path): Directory where the exported HTML file will be saved
        as_app (bool, optional): Whether to export as an app (run mode) or notebook (edit mode).

    Returns:
        bool: True if export succeeded, False otherwise
    """
    notebook_to_export = notebook_path
    cmd: List[str] = ["uvx", "marimo", "export", "html-wasm", "--sandbox"]

    if as_app:
        inlined_path = output_dir / notebook_path
        inline_modules(notebook_path, inlined_path, Path("."))
        notebook_to_export = inlined_path
        logger.info(f"Exporting {notebook_path} as app")
        cmd.extend(["--mode", "run", "--no-show-code"])
    else:
        logger.info(f"Exporting {notebook_path} as notebook")
        cmd.extend(["--mode", "edit"])

    output_file: Path = output_dir / notebook_path.with_suffix(".html")
    output_file.parent.mkdir(parents=True, exist_ok=True)
    cmd.extend([str(notebook_to_export), "-o", str(output_file)])

    try:
        logger.debug(f"Running command: {cmd}")
        subprocess.run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Error exporting {notebook_path}:")
        logger.error(f"Command output: {e.stderr}")
        return False
    except OSError as e:
        logger.error(f"Could not run marimo export for {notebook_path}: {e}")
        return False

    logger.info(f"Successfully exported {notebook_path}")
    return True


def generate_index(output_dir: Path, template_file: Path, apps_data: List[dict]) -> None:
    """Render template_file with the exported apps into output_dir/index.html."""
    logger.info("Generating index.html")

    index_path: Path = output_dir / "index.html"
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_file.parent),
            autoescape=jinja2.select_autoescape(["html", "xml"]),
        )
        template = env.get_template(template_file.name)
        rendered_html = template.render(apps=apps_data)

        with open(index_path, "w", encoding="utf-8") as f:
            f.write(rendered_html)
        logger.info(f"Successfully generated index.html at {index_path}")
    except OSError as e:
        logger.error(f"Error generating index.html: {e}")
    except jinja2.exceptions.TemplateError as e:
        logger.error(f"Error rendering template: {e}")


def _export(folder: Path, output_dir: Path, as_app: bool = False) -> List[dict]:
    """Export every notebook in folder, returning template data for the successful ones."""
    if not folder.exists():
        logger.warning(f"Directory not found: {folder}")
        return []

    notebooks = sorted(nb for nb in folder.rglob("*.py") if "public" not in nb.parts)
    logger.debug(f"Found {len(notebooks)} Python files in {folder}")

    if not notebooks:
        logger.warning(f"No notebooks found in {folder}!")
        return []

    data = [
        {
            "display_name": nb.stem.replace("_", " ").title(),
            "html_path": str(nb.with_suffix(".html")),
        }
        for nb in notebooks
        if export_html_wasm(nb, output_dir, as_app=as_app)
    ]

    logger.info(
        f"Successfully exported {len(data)} out of {len(notebooks)} files from {folder}"
    )
    return data


def main(
    output_dir: Union[str, Path] = "_site",
    template: Union[str, Path] = "templates/index.html.j2",
) -> None:
    """Export all apps in apps/ and write an index page.

    Command line arguments:
        --output-dir: Directory where the exported files will be saved (default: _site)
        --template: Path to the index template (default: templates/index.html.j2)
    """
    logger.info("Starting marimo build process")

    # fire passes strings through unchanged
    output_dir = Path(output_dir)
    template_file = Path(template)
    logger.info(f"Output directory: {output_dir}")
    logger.info(f"Using template file: {template_file}")
    output_dir.mkdir(parents=True, exist_ok=True)

    apps_data = _export(Path("apps"), output_dir, as_app=True)
    if not apps_data:
        logger.warning("No apps exported!")
        return

    generate_index(output_dir=output_dir, template_file=template_file, apps_data=apps_data)
    logger.info(f"Build completed successfully. Output directory: {output_dir}")


if __name__ == "__main__":
    fire.Fire(main)
