import pytest

from minishell.heredoc import Heredoc, HeredocList, count_heredoc, is_heredoc


def test_empty_list():
    heredocs = HeredocList()
    assert len(heredocs) == 0
    assert list(heredocs) == []


def test_add_returns_record_and_keeps_order():
    heredocs = HeredocList()
    first = heredocs.add("EOF")
    second = heredocs.add("END")
    assert list(heredocs) == [first, second]
    assert [h.limiter for h in heredocs] == ["EOF", "END"]
    assert len(heredocs) == 2


def test_file_names_follow_position():
    heredocs = HeredocList()
    assert heredocs.add("a").file_name == "0"
    assert heredocs.add("b").file_name == "1"


def test_file_names_are_unique():
    heredocs = HeredocList()
    for limiter in ["x", "y", "z", "w"]:
        heredocs.add(limiter)
    names = [h.file_name for h in heredocs]
    assert len(set(names)) == len(names)


def test_heredoc_record_fields():
    record = Heredoc(limiter="STOP", file_name="name")
    assert record.limiter == "STOP"
    assert record.file_name == "name"


def test_is_heredoc_returns_position_after_operator():
    text = "cat << EOF"
    start = text.index("<")
    assert is_heredoc(text, start) == start + len("<<")


@pytest.mark.parametrize(
    "text, pos",
    [
        ("cat < in", 4),
        ("<<<", 0),
        ("<<>", 0),
        ("<<|", 0),
        ("abc", 0),
    ],
)
def test_is_heredoc_none(text, pos):
    assert is_heredoc(text, pos) is None


def test_count_heredoc_single():
    assert count_heredoc("cat << EOF") == 1


def test_count_heredoc_none():
    assert count_heredoc("cat < in > out") == 0
    assert count_heredoc("") == 0


def test_count_heredoc_ignores_triple():
    assert count_heredoc("cat <<< word") == 0


def test_count_heredoc_is_additive():
    part = "cat << A "
    assert count_heredoc(part * 3) == 3 * count_heredoc(part)


def test_count_heredoc_operator_at_end():
    assert count_heredoc("cat <<") == count_heredoc("cat << x")


def test_count_matches_is_heredoc_positions():
    text = "a << b | c <<d <<< e"
    found = sum(1 for pos in range(len(text)) if is_heredoc(text, pos) is not None
                and (pos == 0 or text[pos - 1] != "<"))
    assert count_heredoc(text) == found