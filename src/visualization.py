import matplotlib.pyplot as plt
import networkx as nx
from automaton import Automaton


class AutomatonVisualizer:
    def __init__(self, automaton: Automaton):
        self.automaton = automaton

    def build_graph(self):
        G = nx.DiGraph()
        for state in self.automaton.states:
            G.add_node(state)
        if self.automaton.start_state is not None:
            G.add_node(self.automaton.start_state)

        edge_labels = {}

        for from_state, symbol, to_state in self.automaton.transition_list():
            edge_key = (from_state, to_state)
            if edge_key in edge_labels:
                existing_label = edge_labels[edge_key]
                if symbol not in existing_label.split(","):
                    edge_labels[edge_key] = f"{existing_label},{symbol}"
            else:
                G.add_edge(from_state, to_state)
                edge_labels[edge_key] = symbol

        return G, edge_labels

    def node_color(self, node) -> str:
        accepting = node in self.automaton.accepting_states
        if node == self.automaton.start_state:
            return "lightgreen" if accepting else "lightblue"
        if accepting:
            return "lightcoral"
        return "lightgray"

    def plot(self, ax, title="Automaton"):
        G, edge_labels = self.build_graph()

        if len(G.nodes) == 0:
            ax.text(
                0.5,
                0.5,
                "Empty Automaton",
                ha="center",
                va="center",
                transform=ax.transAxes,
            )
            ax.set_title(title)
            return

        if len(G.nodes) <= 6:
            pos = nx.spring_layout(G, k=2.5, iterations=100, seed=42)
        else:
            pos = nx.spring_layout(G, k=1.5, iterations=50, seed=42)

        node_colors = [self.node_color(node) for node in G.nodes()]
        node_size = min(2000, max(800, 15000 // max(len(G.nodes), 1)))
        nx.draw_networkx_nodes(
            G, pos, node_color=node_colors, node_size=node_size, ax=ax, alpha=0.9
        )

        for node, (x, y) in pos.items():
            ax.text(
                x,
                y,
                node,
                ha="center",
                va="center",
                fontsize=8,
                fontweight="bold",
                bbox=dict(
                    boxstyle="round,pad=0.3",
                    facecolor="white",
                    edgecolor="black",
                    alpha=0.9,
                ),
            )

        nx.draw_networkx_edges(
            G,
            pos,
            edge_color="gray",
            arrows=True,
            arrowsize=15,
            arrowstyle="->",
            width=1.2,
            ax=ax,
            alpha=0.7,
        )

        self._draw_edge_labels(ax, pos, edge_labels)
        ax.set_title(title, fontsize=12, fontweight="bold")
        ax.axis("off")

    def _draw_edge_labels(self, ax, pos, edge_labels):
        for (from_node, to_node), label in edge_labels.items():
            x1, y1 = pos[from_node]
            x2, y2 = pos[to_node]

            if from_node == to_node:
                # self-loop, put the label above the node
                label_x, label_y = x1, y1 + 0.15
                bbox_color, edge_color = "yellow", "orange"
            else:
                mid_x, mid_y = (x1 + x2) / 2, (y1 + y2) / 2
                dx, dy = x2 - x1, y2 - y1
                length = (dx**2 + dy**2) ** 0.5

                if length > 0:
                    perp_x, perp_y = -dy / length, dx / length
                    label_x = mid_x + perp_x * 0.08
                    label_y = mid_y + perp_y * 0.08
                else:
                    label_x, label_y = mid_x, mid_y
                if "," in label:
                    bbox_color, edge_color = "lightcyan", "blue"
                else:
                    bbox_color, edge_color = "lightyellow", "orange"
            ax.text(
                label_x,
                label_y,
                label,
                ha="center",
                va="center",
                fontsize=7,
                fontweight="bold",
                bbox=dict(
                    boxstyle="round,pad=0.2",
                    facecolor=bbox_color,
                    alpha=0.9,
                    edgecolor=edge_color,
                ),
            )

    def save(self, path: str, title: str = None) -> None:
        fig, ax = plt.subplots(figsize=(6, 5))
        try:
            self.plot(ax, title or self.automaton.name)
            fig.tight_layout()
            fig.savefig(path)
        finally:
            plt.close(fig)
