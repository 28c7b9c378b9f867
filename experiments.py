#experiments.py
import os
import sys

from huffcodec.codecs import HuffmanCodecFile
from huffcodec.errors import HuffmanError
from huffcodec.logger import Logger
from huffcodec.performance_display import PerformanceDisplay
from huffcodec.validators import validate_file_exists


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path, experiment_root_folder_path):
        self.name = name

        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.binary_output_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.bin")
        self.text_output_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.txt")

        self.logger = Logger()
        self.codec = HuffmanCodecFile()
        self.report = None

    def run(self):
        self.report = self.codec.compress(self.input_file_path, self.binary_output_path,
                                          self.text_output_path, logger=self.logger)

        decoded = self.codec.decompress(self.binary_output_path, self.report)
        with open(self.input_file_path, 'rb') as f:
            self.integrity_preserved = decoded == f.read()

        self.logger.save(os.path.join(self.experiment_folder_path, f"{self.name}_logs.txt"))
        display = PerformanceDisplay(self.logger.logs)
        display.generate_code_length_plot(
            save_path=os.path.join(self.experiment_folder_path, f"{self.name}_code_lengths.png"))
        display.generate_merge_weight_plot(
            save_path=os.path.join(self.experiment_folder_path, f"{self.name}_merge_weights.png"))

    def print_summary(self):
        print(f"Experiment: {self.name}")
        for line in self.report.summary_lines():
            print(f"  {line}")
        print(f"  Distinct bytes: {self.report.frequencies.distinct_count()}")
        print(f"  Longest code: {self.report.code_table.max_length()} bits")
        print(f"  Data integrity {'preserved' if self.integrity_preserved else 'compromised'}.")


def main():
    input_folder = sys.argv[1] if len(sys.argv) > 1 else "experiments_data/patterns"
    output_folder = sys.argv[2] if len(sys.argv) > 2 else "experiments_results"
    validate_file_exists(input_folder)

    for file_name in sorted(os.listdir(input_folder)):
        path = os.path.join(input_folder, file_name)
        if not os.path.isfile(path) or file_name.endswith(".py"):
            continue
        experiment = HuffmanExperiment(os.path.splitext(file_name)[0], path, output_folder)
        try:
            experiment.run()
        except HuffmanError as e:
            print(f"Experiment {experiment.name} failed: {e}")
            continue
        experiment.print_summary()


if __name__ == "__main__":
    main()
