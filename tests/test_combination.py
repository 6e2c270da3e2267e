from patternday.combination import File, Folder


def test_combination(capsys):
    f1 = File("file1.txt")
    f2 = File("file2.txt")
    f3 = File("file3.txt")

    folder1 = Folder("folder1")
    folder2 = Folder("folder2")

    folder1.add(f1)
    folder1.add(f2)

    folder2.add(f3)
    folder2.add(folder1)
    folder2.display()

    assert capsys.readouterr().out.splitlines() == [
        "folder: folder2 ",
        "File: file3.txt ",
        "folder: folder1 ",
        "File: file1.txt ",
        "File: file2.txt ",
    ]
    assert folder2.components == [f3, folder1]


def test_empty_folder(capsys):
    Folder("empty").display()
    assert capsys.readouterr().out == "folder: empty \n"