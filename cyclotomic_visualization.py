"""
Visualizations of cyclotomic integers and their Galois conjugates.
"""

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec
import networkx as nx
from matplotlib.patches import Patch
from sympy import isprime
import os

from cyclotomic_integer import CyclotomicInteger, galois_action
from cyclotomic_embeddings import conjugate_values
from number_theory import euler_phi, unit_group


class CyclotomicVisualizer:
    """Class for generating visualizations of Galois conjugates."""

    def __init__(self, output_dir="./figures"):
        """Initialize with output directory."""
        self.output_dir = output_dir
        # Create output directory if it doesn't exist
        os.makedirs(output_dir, exist_ok=True)

    def _save(self, filename):
        path = os.path.join(self.output_dir, filename)
        plt.tight_layout()
        plt.savefig(path, bbox_inches='tight', dpi=300)
        plt.close()
        return path

    def orbit_sizes(self, n):
        """Return the number of conjugates of z^j for every j in [0, n)."""
        return [len(CyclotomicInteger.from_sparse({j: 1}, n).conjugates(method="hashed"))
                for j in range(n)]

    def galois_graph(self, x):
        """
        Build the directed graph of the Galois action on the conjugates of x.

        Nodes are the positions of the conjugates in x.conjugates(), with the
        coefficient tuple and a circular layout position as attributes. There is
        an edge j -> m whenever some unit k sends conjugate j to conjugate m != j;
        the edge attribute 'units' lists those k.
        """
        conjugates = x.conjugates(method="hashed")
        position = {c.coefficients: idx for idx, c in enumerate(conjugates)}

        G = nx.DiGraph()
        count = len(conjugates)
        for idx, c in enumerate(conjugates):
            angle = 2 * np.pi * idx / count
            G.add_node(idx, coefficients=c.coefficients, pos=(np.cos(angle), np.sin(angle)))

        for idx, c in enumerate(conjugates):
            for k in unit_group(x.level()):
                target = position[galois_action(c.coefficients, k)]
                if target == idx:
                    continue
                if G.has_edge(idx, target):
                    G[idx][target]['units'].append(k)
                else:
                    G.add_edge(idx, target, units=[k])

        return G

    def _plot_conjugates_inset(self, ax, x):
        """Helper method for the complex-plane scatter of the conjugates."""
        values = conjugate_values(x)
        real_parts = [float(v.real) for v in values]
        imag_parts = [float(v.imag) for v in values]

        # Unit circle for reference
        theta = np.linspace(0, 2 * np.pi, 200)
        ax.plot(np.cos(theta), np.sin(theta), color='black', alpha=0.2)

        ax.scatter(real_parts, imag_parts, color='#2C7BB6', s=60, alpha=0.8)
        # Highlight x itself
        ax.scatter(real_parts[0], imag_parts[0], color='#D7191C', s=130, edgecolor='black',
                   label=r"$x = \sigma_1(x)$")

        for idx, (re, im) in enumerate(zip(real_parts, imag_parts)):
            ax.annotate(str(idx), (re, im), fontsize=8, xytext=(5, 5), textcoords='offset points')

        ax.axhline(y=0, color='black', linestyle='-', alpha=0.2)
        ax.axvline(x=0, color='black', linestyle='-', alpha=0.2)
        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal', adjustable='datalim')
        ax.set_xlabel("Real Part", fontsize=12)
        ax.set_ylabel("Imaginary Part", fontsize=12)
        ax.set_title(f"Conjugates at level {x.level()} ({len(values)} of {euler_phi(x.level())})",
                     fontsize=14, pad=15)
        ax.legend(loc='upper right', fontsize=10)

    def _plot_orbit_sizes_inset(self, ax, n):
        """Helper method for the bar chart of orbit sizes of z^j."""
        sizes = self.orbit_sizes(n)
        phi_n = euler_phi(n)

        x_pos = np.arange(n)
        colors = ['#2C7BB6' if s == phi_n else '#D7191C' for s in sizes]
        ax.bar(x_pos, sizes, color=colors)
        ax.set_xticks(x_pos)
        if n > 30:
            ax.set_xticklabels([str(j) for j in range(n)], rotation=90, fontsize=8)
        else:
            ax.set_xticklabels([str(j) for j in range(n)], fontsize=10)

        ax.axhline(y=phi_n, color='black', linestyle='--', alpha=0.7)
        ax.set_ylim(0, phi_n + 0.5)
        ax.set_xlabel("Exponent j", fontsize=12)
        ax.set_ylabel("Number of conjugates", fontsize=12)
        kind = "prime" if isprime(n) else "composite"
        ax.set_title(f"Orbit sizes of powers of a root of unity, level {n} ({kind})", fontsize=14, pad=15)

        legend_elements = [
            Patch(facecolor='#2C7BB6', label=r'Full orbit ($\varphi(n)$)'),
            Patch(facecolor='#D7191C', label='Proper subfield')
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=10)

    def _plot_galois_action_inset(self, ax, x):
        """Helper method for the Galois action graph."""
        G = self.galois_graph(x)
        pos = nx.get_node_attributes(G, 'pos')
        nx.draw(G, pos, with_labels=True, node_color='#2C7BB6',
                node_size=500, font_size=8, ax=ax, font_color='white')
        edge_labels = {(u, v): ",".join(str(k) for k in data['units'])
                       for u, v, data in G.edges(data=True)}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7, ax=ax)
        ax.set_title(r"Galois action $\sigma_k$ on the conjugates", fontsize=14, pad=15)
        return G

    def plot_conjugates(self, x, filename="conjugates.pdf"):
        """
        Plot the conjugates of x in the complex plane.

        Parameters:
        x -- cyclotomic integer
        filename -- output filename
        """
        fig, ax = plt.subplots(figsize=(8, 8))
        self._plot_conjugates_inset(ax, x)
        return self._save(filename)

    def plot_orbit_sizes(self, n, filename="orbit_sizes.pdf"):
        """
        Plot how many conjugates each power z^j of a level-n root of unity has.

        Parameters:
        n -- level
        filename -- output filename
        """
        fig, ax = plt.subplots(figsize=(12, 6))
        self._plot_orbit_sizes_inset(ax, n)
        return self._save(filename)

    def plot_galois_action(self, x, filename="galois_action.pdf"):
        """
        Draw the Galois action on the conjugates of x as a directed graph.

        Returns:
        the networkx DiGraph that was drawn
        """
        fig, ax = plt.subplots(figsize=(8, 8))
        G = self._plot_galois_action_inset(ax, x)
        self._save(filename)
        return G

    def create_full_analysis(self, x, filename="full_analysis.pdf"):
        """
        Create the combined figure: conjugates, Galois action and orbit sizes
        for the level of x.
        """
        fig = plt.figure(figsize=(18, 10))
        gs = gridspec.GridSpec(2, 2, height_ratios=[1, 1], width_ratios=[1, 1], hspace=0.3, wspace=0.2)

        ax1 = plt.subplot(gs[0, 0])
        self._plot_conjugates_inset(ax1, x)

        ax2 = plt.subplot(gs[0, 1])
        self._plot_galois_action_inset(ax2, x)

        ax3 = plt.subplot(gs[1, :])
        self._plot_orbit_sizes_inset(ax3, x.level())

        return self._save(filename)


if __name__ == "__main__":
    visualizer = CyclotomicVisualizer(output_dir="figures")

    print("Generating visualizations...")

    x = CyclotomicInteger.from_sparse({0: 263, 3: -12748}, 10)
    visualizer.plot_conjugates(x)
    visualizer.plot_galois_action(x)
    visualizer.plot_orbit_sizes(12)
    visualizer.create_full_analysis(x)

    print("All visualizations generated successfully in the figures directory!")
