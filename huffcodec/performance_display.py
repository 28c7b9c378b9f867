import matplotlib.pyplot as plt
import numpy as np

from .logger import CodeAssignmentLog, TreeMergeLog


class PerformanceDisplay:
    def __init__(self, logs,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.6,
                 line_color='red', line_linewidth=2):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.line_color = line_color
        self.line_linewidth = line_linewidth

    def _code_assignments(self):
        return sorted((log for log in self.logs if isinstance(log, CodeAssignmentLog)), key=lambda log: log.symbol)

    def _finish(self, title, xlabel, ylabel, show_graph, save_path):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        try:
            if save_path:
                plt.savefig(save_path)
            if show_graph:
                plt.show()
        finally:
            if not show_graph:
                plt.close()

    def generate_code_length_plot(self, show_graph=False, save_path=None):
        """Code length of every byte value next to its share of the input."""
        assignments = self._code_assignments()
        if not assignments:
            print("No data available for Code Length.")
            return False

        x = np.array([log.symbol for log in assignments])
        lengths = np.array([log.code_length for log in assignments])
        frequencies = np.array([log.frequency for log in assignments], dtype=np.float64)
        # -log2 of the probability is the ideal code length of a symbol.
        ideal = -np.log2(frequencies / frequencies.sum())

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.bar(x, lengths, color=self.bar_color, alpha=self.bar_alpha, label="Huffman code length")
        plt.plot(x, ideal, 'o', color=self.line_color, label="Ideal code length")
        self._finish("Code Length per Byte Value", "Byte value", "Bits", show_graph, save_path)
        return True

    def generate_merge_weight_plot(self, show_graph=False, save_path=None):
        """Weight of the node created by every merge step."""
        weights = [log.weight for log in self.logs if isinstance(log, TreeMergeLog)]
        if not weights:
            print("No data available for Merge Weight.")
            return False

        x = np.arange(1, len(weights) + 1)
        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.plot(x, np.array(weights), color=self.line_color, linewidth=self.line_linewidth, label="Merged weight")
        self._finish("Huffman Tree Merge Weights", "Merge step", "Weight", show_graph, save_path)
        return True
