import io

import pytest

from storekeeper.page import ExitPage, PageItem
from storekeeper.renderers import (
    BasicInputMenuRenderer,
    BasicMenuRenderer,
    InputMenuRenderer,
    MenuRenderer,
    ModernMenuRenderer,
)


def items(*labels):
    return [PageItem(label, ExitPage()) for label in labels]


def test_renderer_bases_are_abstract():
    with pytest.raises(TypeError):
        MenuRenderer()
    with pytest.raises(TypeError):
        InputMenuRenderer()


def test_basic_menu_numbers_entries():
    output = io.StringIO()
    BasicMenuRenderer(output).render(items("Input Produk", "exit"))
    assert output.getvalue() == "1. Input Produk\n2. exit\n"


def test_basic_menu_empty():
    output = io.StringIO()
    BasicMenuRenderer(output).render([])
    assert output.getvalue() == ""


def test_modern_menu_rows_follow_items():
    output = io.StringIO()
    labels = ("HISTORY", "Kembali")
    ModernMenuRenderer("HISTORY", output).render(items(*labels))
    rows = output.getvalue().splitlines()[5:-1]
    cells = [row.split("║")[1:3] for row in rows]
    assert [(n.strip(), label.strip()) for n, label in cells] == [
        ("1", "HISTORY"),
        ("2", "Kembali"),
    ]


def test_input_menu_retries_until_valid():
    output = io.StringIO()
    renderer = BasicInputMenuRenderer(io.StringIO("x\n9\n2\n"), output)
    choice = renderer.render(3)
    assert choice.raw_input == "2"
    assert choice.is_valid() is True
    text = output.getvalue()
    assert "Input harus integer\n" in text
    assert "Input harus berada di antara 1 dan 3\n" in text
    assert text.count("Masukkan input anda > ") == 3


def test_input_menu_runs_out_of_input():
    renderer = BasicInputMenuRenderer(io.StringIO("0\n"), io.StringIO())
    with pytest.raises(EOFError):
        renderer.render(2)


def test_change_label():
    renderer = BasicInputMenuRenderer()
    assert renderer.label == "Masukkan input > "
    renderer.change_label("Pilih > ")
    assert renderer.label == "Pilih > "