import matplotlib.pyplot as plt

from automaton import Automaton, EPSILON
from visualization import AutomatonVisualizer


def test_build_graph_merges_labels(nfa_ends_ab):
    G, labels = AutomatonVisualizer(nfa_ends_ab).build_graph()
    assert set(G.nodes) == {"q0", "q1", "q2"}
    assert labels[("q0", "q0")] == "a,b"
    assert labels[("q0", "q1")] == "a"
    assert labels[("q1", "q2")] == "b"


def test_build_graph_epsilon_and_dangling(eps_a_star_b):
    eps_a_star_b.add_transition("qe2", "a", "ghost")
    G, labels = AutomatonVisualizer(eps_a_star_b).build_graph()
    assert labels[("qe0", "qe1")] == EPSILON
    assert "ghost" in G.nodes


def test_node_colors(eps_a_star_b):
    v = AutomatonVisualizer(eps_a_star_b)
    assert v.node_color("qe0") == "lightblue"
    assert v.node_color("qe2") == "lightcoral"
    assert v.node_color("qe1") == "lightgray"
    eps_a_star_b.add_accepting("qe0")
    assert v.node_color("qe0") == "lightgreen"


def test_plot_empty_automaton():
    fig, ax = plt.subplots()
    try:
        AutomatonVisualizer(Automaton()).plot(ax, "Nothing")
        assert ax.get_title() == "Nothing"
        assert any(t.get_text() == "Empty Automaton" for t in ax.texts)
    finally:
        plt.close(fig)


def test_save_writes_file(tmp_path, nfa_ends_ab):
    path = tmp_path / "nfa.png"
    AutomatonVisualizer(nfa_ends_ab).save(str(path))
    assert path.exists()
    assert path.stat().st_size > 0
