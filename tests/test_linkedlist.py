from oddments.linkedlist import LinkedList, main


def _filled(values):
    items = LinkedList()
    for value in values:
        items.insert_front(value)
    return items


def test_empty_list_iterates_nothing():
    assert list(LinkedList()) == []


def test_insert_front_reverses_order():
    values = [3, 5, 7, 9]
    assert list(_filled(values)) == list(reversed(values))


def test_find_present_value():
    assert _filled([3, 5, 7, 9]).find(5) == 5


def test_find_missing_value():
    assert _filled([3, 5, 7, 9]).find(13) is None


def test_find_returns_first_match():
    items = LinkedList()
    first = [1]
    second = [1]
    items.insert_front(second)
    items.insert_front(first)
    assert items.find([1]) is first


def test_main_reports_not_found(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Not found\n"


def test_main_reports_found_value(capsys):
    assert main(["7"]) == 0
    assert capsys.readouterr().out == "7\n"