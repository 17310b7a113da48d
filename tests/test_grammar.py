import pytest

from cfgkit.symbols import Symbol, alphabet
from cfgkit.grammar import Grammar, Rule, IncorrectGrammar, SymbolSpaceExhausted


@pytest.mark.parametrize("terminals, nonterminals, start_symbol, rules, is_correct", [
    ("a", "A", "A", [("A", "a")], True),
    ("b", "A", "A", [("A", "a")], False),
    ("a", "B", "A", [("A", "a")], False),
    ("a", "A", "B", [("A", "a")], False),
    ("a", "A", "A", [("A", "b")], False),
    ("a", "A", "A", [("a", "a")], False),
    ("a", "A", "A", [("", "a")], False),
    ([1], [2], 2, [Rule([2], [1])], True),
    ([1], [2], 2, [Rule([0], [1])], False),
    ("aB", "AB", "A", [("A", "a")], False),
    ("()", "S", "S", [("S", ""), ("S", "SS"), ("S", "(S)")], True),
])
def test_creation_and_correctness(terminals, nonterminals, start_symbol, rules, is_correct):
    if is_correct:
        assert Grammar(terminals, nonterminals, start_symbol, rules).is_correct()
    else:
        with pytest.raises(IncorrectGrammar):
            Grammar(terminals, nonterminals, start_symbol, rules)


@pytest.mark.parametrize("terminals, nonterminals, start_symbol, rules, problem", [
    ("a", "A", "B", [], "start symbol 'B' is not a nonterminal"),
    ("aA", "A", "A", [], "symbol 'A' is both a terminal and a nonterminal"),
    ("a", "A", "A", [("A", "b")], "unknown symbol 'b'"),
    ("a", "A", "A", [("", "a")], "empty left hand side"),
    ("a", "A", "A", [("a", "A")], "has no nonterminal"),
])
def test_incorrect_grammar_message_names_the_problem(terminals, nonterminals, start_symbol, rules, problem):
    with pytest.raises(IncorrectGrammar) as info:
        Grammar(terminals, nonterminals, start_symbol, rules)
    assert problem in str(info.value)
    assert str(info.value).startswith("Grammar is incorrect")


def test_incorrect_grammar_is_logged(log_dir):
    with pytest.raises(IncorrectGrammar):
        Grammar("a", "A", "B", [])

    error_log = (log_dir / "grammar_err.log").read_text()
    assert "start symbol 'B'" in error_log
    assert ", ERR, Grammar: " in error_log


def test_getters():
    rules = [Rule("S", "ABC"), Rule("A", "a")]
    grammar = Grammar("abc", "SABC", "S", rules)

    assert grammar.terminals == alphabet("abc")
    assert grammar.nonterminals == alphabet("SABC")
    assert grammar.start_symbol == Symbol('S')
    assert grammar.rules == rules


def test_rules_given_as_tuples_are_converted():
    grammar = Grammar("a", "S", "S", [("S", "a"), ("S", "")])
    assert grammar.rules == [Rule("S", "a"), Rule("S", "")]


def test_basic_properties():
    grammar = Grammar("abc", "SABC", "S", [("S", "ABC"), ("A", "a")])

    assert grammar.symbol_is_terminal('a')
    assert not grammar.symbol_is_terminal('w')
    assert grammar.symbol_is_nonterminal('C')
    assert not grammar.symbol_is_nonterminal('m')
    assert grammar.symbol_is_correct('a')
    assert grammar.symbol_is_correct(Symbol('S'))
    assert not grammar.symbol_is_correct(')')
    assert grammar.rule_is_correct(Rule("S", "BAaBc"))
    assert grammar.rule_is_correct(Rule("aBA", "cCc"))
    assert not grammar.rule_is_correct(Rule("aBAw", "cCc"))
    assert not grammar.rule_is_correct(Rule("aBA", "cCcw"))
    assert not grammar.rule_is_correct(Rule("w", "a"))
    assert not grammar.rule_is_correct(Rule("a", "a"))
    assert grammar.rule_is_correct(Rule("A", ""))


def test_classification_depends_on_the_grammar():
    first = Grammar("a", "S", "S", [])
    second = Grammar("S", "a", "a", [])
    assert first.symbol_is_terminal('a') and second.symbol_is_nonterminal('a')


def test_rule_comparison():
    assert Rule("A", "abacka") == Rule("A", "abacka")
    assert Rule("AB", "abacka") != Rule("A", "abacka")
    assert Rule("A", "abacka") != Rule("A", "abawka")
    assert Rule("A", "abacka") != Rule("A", "abawkala")
    assert Rule("ROL", "abacka") != Rule("RIL", "abacka")
    assert Rule("A", "ab") == Rule([Symbol('A')], ['a', 98])


def test_rule_text():
    assert str(Rule("S", "AB")) == "S -> AB"
    assert str(Rule("S", "")) == "S -> <eps>"


def test_grammar_text_lists_rules():
    grammar = Grammar("a", "SA", "S", [("S", "A"), ("A", "a")])
    assert str(grammar) == "S -> A\nA -> a\n"


def test_context_free():
    grammar = Grammar("abc", "SABC", "S", [("SA", "ABC"), ("A", "a")])
    assert not grammar.is_context_free()

    grammar = Grammar("abc", "SABC", "S", [("S", "ABABABABABACS"), ("C", "C"), ("A", "a")])
    assert grammar.is_context_free()


def test_new_symbols():
    grammar = Grammar([], "S", "S", [])
    terminal = grammar.add_new_terminal()
    nonterminal = grammar.add_new_nonterminal()

    assert grammar.symbol_is_terminal(terminal)
    assert grammar.symbol_is_nonterminal(nonterminal)
    assert terminal != nonterminal


def test_new_symbols_are_fresh():
    grammar = Grammar("abz", "SA", "S", [("S", "Aa")])
    minted = []
    for i in range(10):
        seen = grammar.terminals | grammar.nonterminals
        symbol = grammar.add_new_terminal() if i % 2 else grammar.add_new_nonterminal()
        assert symbol not in seen
        minted.append(symbol)

    assert len(set(minted)) == 10
    assert all(symbol > Symbol('z') for symbol in minted)


def test_new_symbols_fail_after_max_value():
    grammar = Grammar([Symbol.max_value], "S", "S", [])
    with pytest.raises(SymbolSpaceExhausted):
        grammar.add_new_terminal()
    with pytest.raises(SymbolSpaceExhausted):
        grammar.add_new_nonterminal()


def test_last_symbol_can_be_minted_once():
    grammar = Grammar([Symbol.max_value - 1], "S", "S", [])
    assert grammar.add_new_nonterminal() == Symbol(Symbol.max_value)
    with pytest.raises(SymbolSpaceExhausted):
        grammar.add_new_terminal()


def test_copy_is_independent():
    grammar = Grammar("a", "S", "S", [("S", "a")])
    copy = grammar.copy()
    symbol = copy.add_new_nonterminal()
    copy.rules.append(Rule([symbol], "a"))

    assert not grammar.symbol_is_nonterminal(symbol)
    assert grammar.rules == [Rule("S", "a")]
    assert grammar.add_new_nonterminal() == symbol


def test_exception_messages():
    with pytest.raises(IncorrectGrammar) as info:
        Grammar([], [], "S", [])
    assert str(info.value)

    grammar = Grammar([Symbol.max_value], "S", "S", [])
    with pytest.raises(SymbolSpaceExhausted) as info:
        grammar.add_new_terminal()
    assert str(info.value)
