import json

from streamlit.testing.v1 import AppTest


def write_export(path, names):
    data = {
        "booths": [{"id": "b1", "name": "Govt LP School", "booth_no": 1}],
        "voters": [
            {"id": f"v{i}", "sl_no": i + 1, "name": name, "booth_id": "b1"}
            for i, name in enumerate(names)
        ],
    }
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def totals(at):
    return [m.value for m in at.markdown if "Total voters" in m.value]


def test_switching_source_reloads_same_booth_id(tmp_path, monkeypatch):
    monkeypatch.delenv("DEFAULT_SOURCE", raising=False)
    first = write_export(tmp_path / "first.json", ["രാജു", "രാജ"])
    second = write_export(tmp_path / "second.json", ["അമ്മിണി"])

    at = AppTest.from_file("../app.py", default_timeout=30)
    at.run()
    at.sidebar.text_input[0].set_value(str(first)).run()
    assert not at.exception
    assert totals(at) == ["**Total voters: 2**"]

    at.sidebar.text_input[0].set_value(str(second)).run()
    assert not at.exception
    assert totals(at) == ["**Total voters: 1**"]
