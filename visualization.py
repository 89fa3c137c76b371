"""
TSP Solver - Visualization Module
Plot annealed tours and the best-distance history of a run.
"""

import matplotlib.pyplot as plt
from typing import List, Sequence, Tuple

from tsp_core import Point, tour_length


class TSPVisualizer:
    """Visualize TSP tours and optimization progress."""

    def __init__(self, figsize=(12, 8)):
        self.figsize = figsize

    def plot_tour(
        self,
        points: Sequence[Point],
        tour: Sequence[int],
        title: str = "TSP Tour",
        show_arrows: bool = True,
        save_path: str = None,
        show: bool = True,
    ):
        """
        Plot a single tour.

        Args:
            points: The point sequence the tour indexes into
            tour: Positions into `points` in visiting order
            title: Plot title
            show_arrows: Show direction arrows on edges
            save_path: Optional path to save the figure
            show: Open an interactive window
        """
        fig, ax = plt.subplots(figsize=self.figsize)

        if len(tour) == 0:
            ax.text(0.5, 0.5, 'No points in tour',
                    ha='center', va='center', fontsize=16)
            return fig

        visited = [points[pos] for pos in tour]

        # Extract coordinates
        x_coords = [p.x for p in visited]
        y_coords = [p.y for p in visited]

        # Close the loop
        x_coords.append(visited[0].x)
        y_coords.append(visited[0].y)

        ax.scatter(x_coords[:-1], y_coords[:-1],
                   c='red', s=60, zorder=3, edgecolors='darkred', linewidth=1)

        ax.plot(x_coords, y_coords,
                'b-', linewidth=1.5, alpha=0.6, zorder=1)

        # Label points with their input index
        for p in visited:
            ax.annotate(str(p.index), (p.x, p.y),
                        fontsize=7, xytext=(3, 3), textcoords='offset points')

        if show_arrows and len(visited) > 1:
            for i in range(len(visited)):
                start = visited[i]
                end = visited[(i + 1) % len(visited)]

                mid_x = (start.x + end.x) / 2
                mid_y = (start.y + end.y) / 2
                dx = end.x - start.x
                dy = end.y - start.y

                ax.annotate('',
                            xy=(mid_x + dx * 0.1, mid_y + dy * 0.1),
                            xytext=(mid_x - dx * 0.1, mid_y - dy * 0.1),
                            arrowprops=dict(arrowstyle='->',
                                            color='blue',
                                            lw=1.5,
                                            alpha=0.7))

        # Highlight start point
        ax.scatter([visited[0].x], [visited[0].y],
                   c='green', s=200, zorder=4,
                   marker='*', edgecolors='darkgreen', linewidth=1.5)

        distance = tour_length(points, tour)
        ax.set_title(f"{title}\nTotal Distance: {distance:.2f}",
                     fontsize=14, weight='bold')
        ax.set_xlabel('X Coordinate', fontsize=12)
        ax.set_ylabel('Y Coordinate', fontsize=12)
        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal')

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Tour saved to {save_path}")

        if show:
            plt.show()

        return fig

    def plot_convergence(
        self,
        log: List[Tuple[int, float]],
        title: str = "Convergence History",
        save_path: str = None,
        show: bool = True,
    ):
        """
        Plot the best distance recorded at each reporting interval.

        Args:
            log: (iteration, best_distance) pairs as returned by the solver
            title: Plot title
            save_path: Optional path to save the figure
            show: Open an interactive window
        """
        fig, ax = plt.subplots(figsize=(10, 6))

        if not log:
            ax.text(0.5, 0.5, 'No progress recorded', ha='center', va='center')
            return fig

        iterations = [it for it, _ in log]
        history = [d for _, d in log]

        ax.plot(iterations, history, 'b-', linewidth=2, label='Best Distance')

        initial = history[0]
        final = history[-1]
        improvement = ((initial - final) / initial) * 100 if initial > 0 else 0.0

        ax.axhline(y=final, color='g', linestyle='--',
                   linewidth=1.5, label=f'Final: {final:.2f}')
        ax.axhline(y=initial, color='r', linestyle='--',
                   linewidth=1.5, label=f'Initial: {initial:.2f}')

        ax.set_xlabel('Iteration', fontsize=12)
        ax.set_ylabel('Best Distance', fontsize=12)
        ax.set_title(f"{title}\nImprovement: {improvement:.2f}%",
                     fontsize=14, weight='bold')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='upper right', fontsize=10)

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Convergence plot saved to {save_path}")

        if show:
            plt.show()

        return fig
