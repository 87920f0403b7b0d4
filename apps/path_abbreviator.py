# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "marimo",
# ]
#
# [tool.marimo.display]
# theme = "system"
# ///
"""
Interactive demo: shorten a path to fit a label width.
"""

import marimo

__generated_with = "0.19.4"
app = marimo.App(
    width="medium",
    app_title="Path Abbreviator",
)

with app.setup:
    import marimo as mo


@app.cell
def title():
    mo.md("""
    # Path Abbreviator

    Long paths are cut from the left and prefixed with `…` so the
    file name stays visible.
    """)
    return


@app.cell
def imports():
    # Modules will be auto-inlined by the build script
    from modules.text.paths.abbreviate import abbreviate
    return (abbreviate,)


@app.cell
def inputs():
    path_input = mo.ui.text(
        value="/very/long/path/to/some/deep/file.txt",
        label="Path",
        full_width=True,
    )
    max_len_slider = mo.ui.slider(
        start=0,
        stop=80,
        value=10,
        label="Max length",
        show_value=True,
    )
    mo.vstack([path_input, max_len_slider])
    return max_len_slider, path_input


@app.cell
def result(abbreviate, max_len_slider, path_input):
    _label = abbreviate(path_input.value, max_len_slider.value)
    mo.vstack(
        [
            mo.md("**Label:**"),
            mo.plain_text(_label),
            mo.md(
                f"{len(path_input.value)} characters in, {len(_label)} characters out"
            ),
        ]
    )
    return


if __name__ == "__main__":
    app.run()
