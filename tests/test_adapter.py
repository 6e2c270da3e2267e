from patternday.adapter import Adapter, Client, Mac, Windows


def test_mac(capsys):
    Client().insert_lightning_connector_into_computer(Mac())
    assert capsys.readouterr().out.splitlines() == [
        "Client inserts Lightning connector into computer.",
        "Lightning connector is plugged into mac machine.",
    ]


def test_windows_through_adapter(capsys):
    adapter = Adapter(windows=Windows())
    Client().insert_lightning_connector_into_computer(adapter)
    assert capsys.readouterr().out.splitlines() == [
        "Client inserts Lightning connector into computer.",
        "Adapter converts Lightning signal to USB.",
        "USB connector is plugged into windows machine.",
    ]


def test_windows_direct_usb(capsys):
    Windows().insert_into_usb_port()
    assert capsys.readouterr().out == "USB connector is plugged into windows machine.\n"