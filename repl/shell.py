"""交互式REPL - 逐行读取表达式并打印结果"""
import sys
import logging
from collections import deque

from config.config import REPL_CONFIG
from core import evaluate
from utils.formatting import format_result

logger = logging.getLogger(__name__)


class LineReader:
    """读取一行输入；输入结束时返回 None"""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self):
        line = self.stream.readline()
        if line == '':
            return None
        return line


class ListLineReader(LineReader):
    """从预先给定的行列表读取（脚本和测试用）"""

    def __init__(self, lines):
        super().__init__(stream=None)
        self._lines = deque(lines)

    def read_line(self):
        if not self._lines:
            return None
        return self._lines.popleft()


def run_shell(reader=None, output=None, config=None):
    """
    运行交互循环，直到读到退出命令或输入结束
    Args:
        reader: LineReader，默认读标准输入
        output: 输出流，默认标准输出
        config: REPL配置，默认 REPL_CONFIG
    Returns:
        求值过的行数
    """
    reader = reader or LineReader()
    output = output or sys.stdout
    config = config or REPL_CONFIG

    for line in config["banner"]:
        output.write(f"{line}\n")

    evaluated = 0
    while True:
        output.write(config["prompt"])
        output.flush()

        line = reader.read_line()
        if line is None:
            logger.debug("End of input, leaving shell")
            output.write("\n")
            break
        if line.rstrip() == config["quit_command"]:
            break

        result = evaluate(line)
        output.write(format_result(result, config["error_prefix"]) + "\n")
        evaluated += 1

    logger.info(f"Shell finished after {evaluated} expressions")
    return evaluated
