# workshops/markdown/extensions/fenced_code.py
"""
A Markdown extension for fenced code blocks that hands each block to the
syntax highlighter, keyed by the fence's language tag:

    ```ruby
    puts "hi"
    ```

The highlighter's HTML is stashed so the rest of the pipeline leaves it alone.
"""

import re
from functools import partial

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from ..highlighter import highlight_code


class FencedCodePreprocessor(Preprocessor):
    FENCED_BLOCK_RE = re.compile(
        r"""
        (?P<fence>^(?:~{3,}|`{3,}))[ ]*     # opening fence
        (?P<lang>[\w#.+-]*)[^\n]*\n         # optional language tag, rest of the info string
        (?P<code>.*?)(?<=\n)                # the code block
        (?P=fence)[ ]*$                     # closing fence
        """,
        re.MULTILINE | re.DOTALL | re.VERBOSE,
    )

    def __init__(self, md, highlighter):
        super().__init__(md)
        self.highlighter = highlighter

    def run(self, lines):
        text = "\n".join(lines)
        while True:
            m = self.FENCED_BLOCK_RE.search(text)
            if not m:
                break
            code = self.highlighter(m.group("lang"), m.group("code"))
            placeholder = self.md.htmlStash.store(code)
            text = f"{text[:m.start()]}\n{placeholder}\n{text[m.end():]}"
        return text.split("\n")


class FencedCodeExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "highlighter": [highlight_code, "Callable (language, code, css_class) -> HTML"],
            "css_class": ["highlight", "CSS class wrapping highlighted blocks"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        highlighter = partial(self.getConfig("highlighter"), css_class=self.getConfig("css_class"))
        # Before raw HTML blocks are extracted, like the stock fenced_code extension
        md.preprocessors.register(FencedCodePreprocessor(md, highlighter), "fenced_code_block", 25)


def makeExtension(**kwargs):
    return FencedCodeExtension(**kwargs)
