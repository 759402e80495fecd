"""HTML to plain text conversion."""

import re

from bs4 import BeautifulSoup


class HtmlToText:
    """Flattens HTML to its text content with tidy whitespace."""

    def convert(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        text: str = soup.get_text()

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        text = re.sub(r"[ \t\f\v]+", " ", text)
        text = "\n".join(line.strip() for line in text.split("\n"))
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip() + "\n"
