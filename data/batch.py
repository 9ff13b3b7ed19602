"""批量求值模块 - 表达式文件读取、求值、结果保存"""
import pandas as pd
import numpy as np
import logging

from config.config import BATCH_CONFIG
from core import evaluate

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'result', 'error', 'message']


def load_expressions(file_path, expression_column=None):
    """
    加载表达式列表

    Parameters:
    - file_path: CSV文件（取表达式列）或文本文件（每行一个表达式）
    - expression_column: CSV中表达式列名, 默认取 BATCH_CONFIG

    Returns:
    - 表达式字符串列表
    """
    logger.info(f"Loading expressions from {file_path}")
    expression_column = expression_column or BATCH_CONFIG['expression_column']

    if str(file_path).endswith('.csv'):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        # 确保表达式列存在
        if expression_column not in df.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in {file_path}.")
        expressions = df[expression_column].tolist()
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        comment = BATCH_CONFIG['comment_prefix']
        expressions = [line for line in lines if line and not line.startswith(comment)]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions):
    """
    逐个求值，失败的行 result 为 NaN

    Returns:
    - DataFrame, 列为 expression / result / error / message，行序与输入一致
    """
    expression_list, results, kinds, messages = [], [], [], []
    for expression in expressions:
        outcome = evaluate(expression)
        expression_list.append(expression)
        if outcome.ok:
            results.append(outcome.value)
            kinds.append(None)
            messages.append(None)
        else:
            results.append(np.nan)
            kinds.append(outcome.error.kind)
            messages.append(outcome.error.message)

    # error/message 为 object 列，成功行保持 None
    df = pd.DataFrame({
        'expression': pd.Series(expression_list, dtype=object),
        'result': pd.Series(results, dtype=float),
        'error': pd.Series(kinds, dtype=object),
        'message': pd.Series(messages, dtype=object),
    }, columns=RESULT_COLUMNS)

    failed = int(df['error'].notna().sum())
    logger.info(f"Evaluated {len(df)} expressions, {failed} failed")
    return df


def save_results(df, output_path=None):
    """保存结果到CSV"""
    output_path = output_path or BATCH_CONFIG['default_output_path']
    logger.info(f"Saving {len(df)} results to {output_path}")
    df.to_csv(output_path, index=False)
    return output_path
