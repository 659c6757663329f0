import pytest

from rustlings.lessons import basics


@pytest.mark.parametrize("apples, price", [(35, 70), (40, 80), (65, 65)])
def test_calculate_price_of_apples(apples, price):
    assert basics.calculate_price_of_apples(apples) == price


def test_call_me_prints_numbered_lines(capsys):
    lines = basics.call_me(3)
    assert lines == ["Ring! Call number 1", "Ring! Call number 2", "Ring! Call number 3"]
    assert capsys.readouterr().out.splitlines() == lines


def test_call_me_zero():
    assert basics.call_me(0) == []


@pytest.mark.parametrize("price, sale", [(51, 48), (50, 40)])
def test_sale_price(price, sale):
    assert basics.sale_price(price) == sale


def test_is_true_when_even():
    assert basics.is_even(4) is True


def test_is_false_when_odd():
    assert basics.is_even(5) is False


def test_square():
    assert basics.square(3) == 9


def test_ten_is_bigger_than_eight():
    assert basics.bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert basics.bigger(32, 42) == 42


@pytest.mark.parametrize(
    "word, expected", [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")]
)
def test_foo_if_fizz(word, expected):
    assert basics.foo_if_fizz(word) == expected


def test_intro_message():
    message = basics.intro_message()
    assert message.startswith("Hello and\n       welcome to...")
    assert "solve the exercises. Good luck!" in message


def test_color_words():
    assert basics.current_favorite_color() == "blue"
    assert basics.is_a_color_word("green") is True
    assert basics.is_a_color_word("purple") is False


def test_trim_a_string():
    assert basics.trim_me("Hello!     ") == "Hello!"
    assert basics.trim_me("  What's up!") == "What's up!"
    assert basics.trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert basics.compose_me("Hello") == "Hello world!"
    assert basics.compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert basics.replace_me("I think cars are cool") == "I think balloons are cool"
    assert basics.replace_me("I love to look at cars") == "I love to look at balloons"


def test_array_and_vec_similarity():
    array, vec = basics.array_and_vec()
    assert list(array) == vec
    assert vec == [10, 20, 30, 40]


def test_vec_loop_doubles_in_place():
    values = [2, 4, 6, 8, 10]
    result = basics.vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map_returns_new_list():
    values = [2, 4, 6, 8, 10]
    assert basics.vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_greeting():
    assert basics.greeting(True) == "Good morning!"
    assert basics.greeting(False) == "Good evening!"


@pytest.mark.parametrize(
    "character, expected",
    [("C", "Alphabetical!"), ("7", "Numerical!"), ("!", "Neither alphabetic nor numeric!")],
)
def test_classify_character(character, expected):
    assert basics.classify_character(character) == expected


def test_describe_array():
    assert basics.describe_array([0] * 100) == "Wow, that's a big array!"
    assert basics.describe_array([0] * 99) == "Meh, I eat arrays like that for breakfast."


def test_slice_out_of_array():
    assert basics.middle_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_describe_cat():
    assert basics.describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_circle_area():
    assert basics.circle_area(5.0) == pytest.approx(78.53982, rel=1e-6)


def test_add_optional():
    assert basics.add_optional(42, 12) == 54
    assert basics.add_optional(42, None) == 42


def test_swap_values():
    assert basics.swap_values(45, 66) == (66, 45)