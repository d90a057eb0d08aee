import re
import sys
from pathlib import Path

# Ensure we import the repo-local highlightdiff (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import highlightdiff  # noqa: E402


def change_spans(html: str) -> list[str]:
    return re.findall(r'<span class="x">([^<]*)</span>', html)


def main():
    hunks = [
        "@@ -1,3 +1,3 @@\n def area(r):\n-    return 3.14 * r * r\n+    return math.pi * r ** 2\n",
        "@@ -7,2 +7,3 @@\n-Información clínica: <none>\n+Información clínica: \"n/a\"\n+Hallazgos: ninguno\n",
        "-a\n-b\n+c\n",
    ]
    for text in hunks:
        out = highlightdiff.highlight(text)
        print("changes:", change_spans(out))
        print(out)


if __name__ == "__main__":
    main()
