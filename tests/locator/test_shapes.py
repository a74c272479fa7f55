"""Tests for locator/shapes.py registry and per-language shape tests."""

from __future__ import annotations

import pytest

from linkcomment.core.languages import SUPPORTED_LANGUAGES, LanguageTag
from linkcomment.locator.shapes import (
    c_family_shape,
    generic_shape,
    go_shape,
    java_shape,
    js_shape,
    php_shape,
    python_shape,
    register_shape,
    registered_tags,
    rust_shape,
    shape_for,
)


class TestRegistry:
    def test_every_supported_language_has_a_shape(self) -> None:
        assert registered_tags() == frozenset(SUPPORTED_LANGUAGES)

    @pytest.mark.parametrize("tag", [LanguageTag.RUBY, LanguageTag.CSHARP])
    def test_unregistered_tags_use_generic_shape(self, tag: LanguageTag) -> None:
        assert shape_for(tag) is generic_shape

    def test_js_and_ts_share_a_shape(self) -> None:
        assert shape_for(LanguageTag.JAVASCRIPT) is shape_for(LanguageTag.TYPESCRIPT)

    def test_c_and_cpp_share_a_shape(self) -> None:
        assert shape_for(LanguageTag.C) is shape_for(LanguageTag.CPP) is c_family_shape

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError, match="python"):
            register_shape(LanguageTag.PYTHON)(lambda line: True)
        assert shape_for(LanguageTag.PYTHON) is python_shape


class TestPythonShape:
    @pytest.mark.parametrize("line", ["def helper():", "class Foo(Base):", "def  spaced(x):"])
    def test_definitions(self, line: str) -> None:
        assert python_shape(line)

    @pytest.mark.parametrize("line", ["helper()", "x = helper", "define = 1", "classy = True"])
    def test_non_definitions(self, line: str) -> None:
        assert not python_shape(line)


class TestJsShape:
    @pytest.mark.parametrize(
        "line",
        [
            "function render() {",
            "async function load(url) {",
            "const handler = (e) => {",
            "class Widget extends Base {",
            "items.forEach(item => {",
            "render(props) {",
            "export const API_URL = 'x';",
            "export function build() {",
            "export default class App {",
        ],
    )
    def test_declaration_forms(self, line: str) -> None:
        assert js_shape(line)

    @pytest.mark.parametrize("line", ["render();", "let x = 5;", "return value;", "import x from 'y';"])
    def test_non_declarations(self, line: str) -> None:
        assert not js_shape(line)


class TestPhpShape:
    @pytest.mark.parametrize("line", ["function helper($a) {", "class Repo {"])
    def test_definitions(self, line: str) -> None:
        assert php_shape(line)

    @pytest.mark.parametrize("line", ["public function helper() {", "$x = helper();"])
    def test_must_start_with_keyword(self, line: str) -> None:
        assert not php_shape(line)


class TestJavaShape:
    @pytest.mark.parametrize(
        "line",
        [
            "public static void main(String[] args) {",
            "private int count() {",
            "int add(int a, int b) {",
            "class Foo {",
            "interface Shape {",
        ],
    )
    def test_definitions(self, line: str) -> None:
        assert java_shape(line)

    @pytest.mark.parametrize("line", ["count++;", "public class Foo {", "foo();"])
    def test_non_definitions(self, line: str) -> None:
        assert not java_shape(line)


class TestGoShape:
    @pytest.mark.parametrize("line", ["func Foo() {}", "func (s *Server) Start() error {"])
    def test_definitions(self, line: str) -> None:
        assert go_shape(line)

    @pytest.mark.parametrize("line", ["Foo()", "functional := true", "type Foo struct {"])
    def test_non_definitions(self, line: str) -> None:
        assert not go_shape(line)


class TestRustShape:
    @pytest.mark.parametrize("line", ["fn helper() {", "pub fn new() -> Self {"])
    def test_definitions(self, line: str) -> None:
        assert rust_shape(line)

    @pytest.mark.parametrize("line", ["let x = helper();", "pub struct Point {", "pub(crate) fn x() {"])
    def test_non_definitions(self, line: str) -> None:
        assert not rust_shape(line)


class TestCFamilyShape:
    @pytest.mark.parametrize(
        "line",
        [
            "int main(int argc, char **argv) {",
            "static void helper(void)",
            "unsigned long long hash(const char* s) {",
        ],
    )
    def test_definitions(self, line: str) -> None:
        assert c_family_shape(line)

    @pytest.mark.parametrize("line", ["helper();", "x = 3;", "// int main(void)"])
    def test_non_definitions(self, line: str) -> None:
        assert not c_family_shape(line)

    def test_qualified_return_type_not_matched(self) -> None:
        assert not c_family_shape("std::string Name() const {")


class TestGenericShape:
    @pytest.mark.parametrize("line", ["def greet", "class Greeter", "public class Runner {", "function x"])
    def test_keywords(self, line: str) -> None:
        assert generic_shape(line)

    @pytest.mark.parametrize("line", ["greet()", "public void Run() {"])
    def test_no_keywords(self, line: str) -> None:
        assert not generic_shape(line)
