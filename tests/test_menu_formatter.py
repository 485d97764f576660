from rofi_files.ui.menu_formatter import MenuLine, MenuLineFormatter


def test_line_byte_layout():
    assert MenuLine("a.txt", "text-x-generic").encode() == "a.txt\x00icon\x1ftext-x-generic"


def test_parent_line_always_first():
    text = MenuLineFormatter.format([MenuLine("b", "folder")])
    assert text.split("\n")[0] == "..\x00icon\x1ffolder"


def test_empty_listing_is_parent_line_only():
    assert MenuLineFormatter.format([]) == "..\x00icon\x1ffolder"


def test_lines_joined_without_trailing_separator():
    text = MenuLineFormatter.format([
        MenuLine("b", "folder"),
        MenuLine("a.txt", "text-x-generic"),
    ])
    assert text == (
        "..\x00icon\x1ffolder\n"
        "b\x00icon\x1ffolder\n"
        "a.txt\x00icon\x1ftext-x-generic"
    )


def test_prompt_line():
    assert MenuLineFormatter.prompt("Files") == "\x00prompt\x1fFiles"
