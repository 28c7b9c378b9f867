"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Union, Optional

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyCountLog(Log):
    def __init__(self, total_bytes: int, distinct_symbols: int) -> None:
        self.total_bytes = total_bytes
        self.distinct_symbols = distinct_symbols
        super().__init__("Frequency_count_log", LogLevel.INFO,
                         f"Total bytes: {total_bytes}, Distinct symbols: {distinct_symbols}")


class TreeMergeLog(Log):
    def __init__(self, left_weight: int, right_weight: int) -> None:
        self.left_weight = left_weight
        self.right_weight = right_weight
        self.weight = left_weight + right_weight
        super().__init__("Tree_merge_log", LogLevel.INFO,
                         f"Left weight: {left_weight}, Right weight: {right_weight}, Merged weight: {self.weight}")


class CodeAssignmentLog(Log):
    def __init__(self, symbol: int, code: str, frequency: int) -> None:
        self.symbol = symbol
        self.code = code
        self.code_length = len(code)
        self.frequency = frequency
        super().__init__("Code_assignment_log", LogLevel.INFO,
                         f"Symbol: {symbol}, Code: {code}, Frequency: {frequency}")


class CodingLog(Log):
    def __init__(self, input_size: int, encoded_bits: int) -> None:
        self.input_size = input_size
        self.encoded_bits = encoded_bits
        super().__init__("Coding_log", LogLevel.INFO, f"Input size: {input_size}, Encoded bits: {encoded_bits}")


class CompressionSummaryLog(Log):
    def __init__(self, original_size: int, compressed_size: int) -> None:
        self.original_size = original_size
        self.compressed_size = compressed_size
        super().__init__("Compression_summary_log", LogLevel.INFO,
                         f"Original size: {original_size}, Compressed size: {compressed_size}")


class CountingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Counting_progress_step", LogLevel.PROGRESS, message)


class EncodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Encoding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.counting_progress_count = 0
        self.encoding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.counting_step_interval_count = 100
        self.encoding_step_interval_count = 100

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, CountingProgressStep):
                self.counting_progress_count += 1
                count = self.counting_progress_count
                interval = self.counting_step_interval_count
            elif isinstance(log, EncodingProgressStep):
                self.encoding_progress_count += 1
                count = self.encoding_progress_count
                interval = self.encoding_step_interval_count
            else:
                return
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            if self.record_progress:
                self.logs.append(log)
            if self.display_progress and (count % interval == 0):
                print(log)

    def warning(self, message: str) -> None:
        self.log(Log("Warning", LogLevel.WARNING, message))

    def error(self, message: str) -> None:
        self.log(Log("Error", LogLevel.ERROR, message))

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
