"""Markdown→Slack mrkdwn変換モジュール

GitHub MarkdownをSlack mrkdwn記法に変換する薄いラッパー。
変換後、コード部分とSlackリンク記法のURL部分を除いて &, <, > をエスケープする。
"""

import re

from markdown_to_mrkdwn import SlackMarkdownConverter

_CODE_PATTERN = re.compile(r"(```[\s\S]*?```|`[^`]+`)")
_LINK_START_PATTERN = re.compile(r"<(?:https?://|mailto:)")


def escape_mrkdwn(text: str) -> str:
    """テキスト内の &, <, > をエスケープする"""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_outside_links(text: str) -> str:
    """Slackリンク（<url> / <url|text>）のURLは保持し、それ以外をエスケープする

    <url|text> のtextには > が含まれうるため、次のリンク開始より前にある最後の > をリンクの終端とする。
    """
    result: list[str] = []
    pos = 0
    while (start := _LINK_START_PATTERN.search(text, pos)) is not None:
        open_pos = start.start()
        result.append(escape_mrkdwn(text[pos:open_pos]))

        next_link = _LINK_START_PATTERN.search(text, start.end())
        search_end = next_link.start() if next_link else len(text)
        pipe_pos = text.find("|", open_pos, search_end)
        close_pos = text.find(">", open_pos, search_end)

        if pipe_pos != -1 and close_pos != -1 and pipe_pos < close_pos:
            final_close = text.rfind(">", pipe_pos + 1, search_end)
            url, label = text[open_pos + 1 : pipe_pos], text[pipe_pos + 1 : final_close]
            result.append(f"<{url}|{escape_mrkdwn(label)}>")
            pos = final_close + 1
        elif close_pos != -1:
            result.append(text[open_pos : close_pos + 1])
            pos = close_pos + 1
        else:
            # 閉じ > がないものはリンクとして扱わない
            result.append(escape_mrkdwn("<"))
            pos = open_pos + 1
    result.append(escape_mrkdwn(text[pos:]))
    return "".join(result)


def escape_special_chars(text: str) -> str:
    """コードブロック・インラインコードを除いて特殊文字をエスケープする"""
    parts = _CODE_PATTERN.split(text)
    # splitの結果は奇数番目がコード部分
    return "".join(part if i % 2 == 1 else _escape_outside_links(part) for i, part in enumerate(parts))


def convert_markdown_to_mrkdwn(text: str) -> str:
    """MarkdownテキストをSlack mrkdwn記法に変換する。

    Args:
        text: Markdown形式のテキスト

    Returns:
        Slack mrkdwn形式に変換されたテキスト
    """
    converter = SlackMarkdownConverter()
    return escape_special_chars(converter.convert(text))
