"""Tests for module synthesis and rendering."""

from etapack.module import (
    ModuleSource,
    PartialImport,
    Renderer,
    build_module,
    export_template_function,
    synthesize,
)
from etapack.template import compile

FUNCTION = "function anonymous(it,E,cb) {\nreturn 'x'\n}"


def test_export_template_function_renames_once():
    fn = "function anonymous(it,E,cb) {\nvar f = 'function anonymous'\n}"
    renamed = export_template_function(fn)
    assert renamed.startswith("export function template(it,E,cb) {")
    assert "var f = 'function anonymous'" in renamed


def test_build_module_indexes_aliases_in_order():
    module = build_module(FUNCTION, ["header", "footer"], "/t/", sep="/")
    assert [p.name for p in module.imports] == ["header", "footer"]
    assert [p.alias for p in module.imports] == ["partialTemplate$0", "partialTemplate$1"]
    assert [p.import_path for p in module.imports] == ["/t/header", "/t/footer"]
    assert module.config_module == "@@@eta-config"


def test_build_module_windows_paths_are_escaped():
    module = build_module(FUNCTION, ["greeting"], "C:\\t\\", sep="\\")
    assert module.imports[0].import_path == "C:\\\\t\\\\greeting"


def test_synthesize_statement_order():
    source = synthesize(FUNCTION, ["header", "footer"], "/t/", sep="/")
    lines = source.split("\n")

    assert lines[0] == "import { config } from '@@@eta-config'"
    assert lines[1] == "import { template as partialTemplate$0 } from '/t/header'"
    assert lines[2] == "import { template as partialTemplate$1 } from '/t/footer'"
    assert "config.templates.define('header', partialTemplate$0)" in lines
    assert "config.templates.define('footer', partialTemplate$1)" in lines
    assert lines.index("config.templates.define('header', partialTemplate$0)") < lines.index(
        "config.templates.define('footer', partialTemplate$1)"
    )
    assert lines.index("export function template(it,E,cb) {") > lines.index(
        "config.templates.define('footer', partialTemplate$1)"
    )


def test_synthesize_without_partials():
    source = synthesize(FUNCTION, [], "/t/", sep="/")
    assert source.startswith("import { config } from '@@@eta-config'\n")
    assert "partialTemplate$" not in source
    assert "config.templates.define" not in source
    assert "export function template(it,E,cb) {" in source


def test_synthesize_default_export_binds_shared_config():
    source = synthesize(compile("Hi"), [], "/t/", sep="/")
    assert source.endswith(
        "export default function templateFunction (data) {\n"
        "  return template(data, config)\n"
        "}"
    )


def test_partial_names_are_escaped_in_registration():
    module = ModuleSource(
        template_fn="export function template() {}",
        imports=[PartialImport(name="it's", alias="partialTemplate$0", import_path="/t/x")],
    )
    source = Renderer().render(module)
    assert "config.templates.define('it\\'s', partialTemplate$0)" in source
