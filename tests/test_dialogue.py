from dreamdex.dialogue import build_dialogue
from dreamdex.script_ids import Dia


def test_every_line_is_present():
    dialogue = build_dialogue()
    assert set(dialogue) == set(Dia)


def test_unwritten_lines_are_empty():
    dialogue = build_dialogue()
    empty = {dia for dia, text in dialogue.items() if text == ""}
    assert empty == {Dia.ERROR_1, Dia.CONN_GOOD, Dia.LINK_GOOD}


def test_pinned_lines():
    dialogue = build_dialogue()
    assert dialogue[Dia.TRANS_GOOD] == "Amazing! Fantastic!\nEverything went perfectly!"
    assert dialogue[Dia.MENU_BACK] == "No worries! Feel free to\ncome back any time!"
    assert dialogue[Dia.OPEN].startswith("Hey there! I'm Professor\nFennel.")
    assert dialogue[Dia.OPEN].endswith("start, just let me know!")


def test_pages_are_never_empty():
    for text in build_dialogue().values():
        if text:
            assert all(page for page in text.split("|"))


def test_error_lines_end_with_retry_page():
    dialogue = build_dialogue()
    for dia in (
        Dia.ERROR_COLOSSEUM,
        Dia.ERROR_COM_ENDED,
        Dia.ERROR_DISCONNECT,
        Dia.ERROR_TIME_ONE,
        Dia.ERROR_TIME_TWO,
    ):
        assert dialogue[dia].split("|")[-1] == "Let's try that again!"


def test_send_friend_lines_share_first_page():
    dialogue = build_dialogue()
    first_pages = {
        dialogue[dia].split("|")[0]
        for dia in (
            Dia.SEND_FRIEND_KANTO,
            Dia.SEND_FRIEND_HOENN_RS,
            Dia.SEND_FRIEND_HOENN_E,
        )
    }
    assert len(first_pages) == 1


def test_tables_are_independent():
    first = build_dialogue()
    second = build_dialogue()
    assert first == second
    first[Dia.THANK] = "changed"
    assert second[Dia.THANK] != "changed"
    assert build_dialogue()[Dia.THANK].endswith("See you around!")