# examples/demo_pipeline.py
from cg2d.pipeline import summarize, status_lines

if __name__ == "__main__":
    touches = [
        (120, 340), (410, 300), (380, 610), (150, 580), (260, 450)
    ]

    summary = summarize(touches, backend="internal")  # або "scipy"
    for line in status_lines(summary):
        print(line)
    print("Enclosing circle:", summary.circle)
    print("Hull:", summary.hull)
    print("Oriented bbox:", summary.rect, summary.rect_size)
