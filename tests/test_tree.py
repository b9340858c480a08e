import pytest

from hinttree import HintTree

SCENARIO = ["cat", "car", "carpet", "cactus", "java", "javascript", "internet"]


@pytest.fixture
def tree():
    t = HintTree()
    t.insert_all(SCENARIO)
    return t


def test_scenario_queries(tree):
    assert set(tree.search("ca")) == {"cat", "car", "carpet", "cactus"}
    assert set(tree.search("car")) == {"car", "carpet"}
    assert tree.search("internet") == ["internet"]
    assert tree.search("xyz") == []
    assert set(tree.search("j")) == {"java", "javascript"}


def test_results_are_sorted(tree):
    assert tree.search("ca") == ["cactus", "car", "carpet", "cat"]
    assert list(tree) == sorted(SCENARIO)


def test_every_word_and_prefix_finds_the_word(tree):
    for word in SCENARIO:
        for end in range(1, len(word) + 1):
            assert word in tree.search(word[:end])


def test_no_false_positives(tree):
    for query in ["c", "ca", "cac", "carp", "carx", "jav", "javas", "in", "i", "x", "cart"]:
        for hint in tree.search(query):
            assert hint.startswith(query)
            assert hint in SCENARIO


def test_query_diverging_inside_node_text():
    t = HintTree()
    t.insert_all(["ab", "abxyz"])
    assert t.search("axyz") == []
    assert t.search("abx") == ["abxyz"]
    assert t.search("ab") == ["ab", "abxyz"]


def test_query_longer_than_stored_words(tree):
    assert tree.search("carpets") == []
    assert tree.search("internets") == []


@pytest.mark.parametrize("query", ["", None, "a b", "ca t", " "])
def test_filtered_queries_return_nothing(tree, query):
    assert tree.search(query) == []


@pytest.mark.parametrize("word", ["", None, "hello world", " "])
def test_filtered_words_are_ignored(word):
    t = HintTree()
    t.insert(word)
    assert t.roots == {}
    assert len(t) == 0


def test_accepts():
    assert HintTree.accepts("word")
    assert not HintTree.accepts("")
    assert not HintTree.accepts(None)
    assert not HintTree.accepts("two words")


def test_idempotent_insertion(tree):
    before = {q: tree.search(q) for q in ["c", "ca", "car", "j", "i"]}
    tree.insert_all(SCENARIO)
    after = {q: tree.search(q) for q in ["c", "ca", "car", "j", "i"]}
    assert before == after
    assert len(tree) == len(SCENARIO)


def test_branch_split_structure():
    t = HintTree()
    t.insert("car")
    t.insert("cat")
    root = t.roots["c"]
    assert root.text == "ca"
    assert set(root.children) == {"r", "t"}
    assert root.children["r"].text == "r"
    assert root.children["t"].text == "t"
    assert root.children["r"].is_leaf
    assert root.children["t"].is_leaf

    t.insert("car")
    assert root.text == "ca"
    assert set(root.children) == {"r", "t"}
    assert root.children["r"].is_leaf


def test_shorter_word_inserted_after_branching():
    t = HintTree()
    t.insert_all(["car", "cat", "c"])
    assert t.search("c") == ["c", "car", "cat"]
    assert t.search("ca") == ["car", "cat"]
    assert t.search("car") == ["car"]
    assert "ca" not in t


def test_branching_prefix_inserted_as_word():
    t = HintTree()
    t.insert_all(["car", "cat"])
    assert "ca" not in t
    t.insert("ca")
    assert "ca" in t
    assert t.search("ca") == ["ca", "car", "cat"]
    assert t.roots["c"].text == "ca"


def test_divergence_inside_node_with_terminator():
    t = HintTree()
    t.insert_all(["cab", "cabbage", "cax"])
    assert t.search("ca") == ["cab", "cabbage", "cax"]
    assert t.search("cab") == ["cab", "cabbage"]
    assert "ca" not in t


def test_prefix_word_before_and_after_longer_word():
    first = HintTree()
    first.insert_all(["car", "carpet"])
    second = HintTree()
    second.insert_all(["carpet", "car"])
    for t in (first, second):
        assert t.search("car") == ["car", "carpet"]
        assert t.search("carp") == ["carpet"]


def test_single_character_words():
    t = HintTree()
    t.insert_all(["a", "ab", "b"])
    assert t.search("a") == ["a", "ab"]
    assert t.search("b") == ["b"]
    assert t.search("ab") == ["ab"]


def test_contains(tree):
    assert "carpet" in tree
    assert "carp" not in tree
    assert "" not in tree
    assert None not in tree


def test_non_ascii_characters_compared_raw():
    t = HintTree()
    t.insert_all(["café", "cafe", "ćevapi"])
    assert t.search("caf") == ["cafe", "café"]
    assert t.search("ć") == ["ćevapi"]


def test_str_renders_structure():
    t = HintTree()
    t.insert_all(["car", "cat", "ca"])
    assert str(t) == "ca\n  $\n  r\n  t"
