"""Tests pour ConfigReader et read_config."""

from unittest.mock import MagicMock, patch

import pytest

from lxc_python_config import (AllocationFailureError, ConfigReader,
                               ConsoleErrorHandler, ErrorHandlerChain,
                               FileLogger, InvalidDirectiveError,
                               InvalidValueError, LoggerErrorHandler,
                               LxcConf, NetworkType,
                               ReaderSettings, UnknownDirectiveError,
                               read_config)

SAMPLE_CONFIG = """\
# Conteneur web
lxc.utsname = web01
lxc.tty = 4
lxc.pts = 1024
lxc.rootfs = /var/lib/lxc/web01/rootfs

lxc.network.type = veth
lxc.network.flags = up
lxc.network.link = br0
lxc.network.name = eth0
lxc.network.hwaddr = 4a:49:43:49:79:bf
lxc.network.mtu = 1500
lxc.network.ipv4 = 10.2.3.5/24 10.2.3.255
lxc.network.ipv6 = 2003:db8:1:0:214:1234:fe0b:3597

lxc.network.type = empty

lxc.cgroup.cpuset.cpus = 0,1
lxc.cgroup.memory.limit_in_bytes = 256M
lxc.mount = /var/lib/lxc/web01/fstab
lxc.mount.entry = proc /var/lib/lxc/web01/rootfs/proc proc nodev,noexec,nosuid 0 0
"""


@pytest.fixture
def config_file(tmp_path):
    """Écrit un fichier de configuration complet."""
    path = tmp_path / "web01.conf"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


class TestReadConfig:
    """Tests pour read_config sur un fichier complet."""

    def test_fichier_complet(self, config_file) -> None:
        """Toutes les familles de directives sont appliquées."""
        conf = read_config(config_file)

        assert conf.utsname.nodename == "web01"
        assert conf.tty == 4
        assert conf.pts == 1024
        assert conf.rootfs == "/var/lib/lxc/web01/rootfs"
        assert conf.fstab == "/var/lib/lxc/web01/fstab"
        assert len(conf.mount_list) == 1
        assert [e.subsystem for e in conf.cgroup] == [
            "cpuset.cpus",
            "memory.limit_in_bytes",
        ]

        empty, veth = conf.network
        assert empty.type == NetworkType.EMPTY
        assert veth.type == NetworkType.VETH
        assert veth.is_up
        assert veth.link == "br0"
        assert veth.name == "eth0"
        assert veth.mtu == "1500"
        assert veth.ipv4[0].prefix == 24
        assert veth.ipv6[0].prefix == 64

    def test_agregat_fourni(self, config_file) -> None:
        """L'agrégat passé en argument est rempli et retourné."""
        conf = LxcConf()
        assert read_config(config_file, conf) is conf
        assert conf.tty == 4

    def test_fichier_absent(self, tmp_path) -> None:
        """Un fichier absent lève FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_config(tmp_path / "absent.conf")

    def test_reglages(self, tmp_path) -> None:
        """Les réglages sont transmis aux handlers."""
        path = tmp_path / "legacy.conf"
        path.write_text("lxc.tty = abc\n", encoding="utf-8")

        conf = read_config(path, settings=ReaderSettings(legacy_numeric=True))

        assert conf.tty == 0

    def test_journal_fichier(self, config_file, tmp_path) -> None:
        """La lecture est tracée dans le FileLogger."""
        log_file = tmp_path / "reader.log"
        read_config(config_file, logger=FileLogger(str(log_file)))

        content = log_file.read_text(encoding="utf-8")
        assert "Lecture de la configuration" in content
        assert "2 interface(s)" in content


class TestConfigReaderErreurs:
    """Tests pour l'arrêt à la première erreur."""

    def test_arret_a_la_premiere_erreur(self) -> None:
        """Les lignes suivant l'erreur ne sont pas lues."""
        conf = LxcConf()
        with pytest.raises(UnknownDirectiveError):
            ConfigReader().read_lines(
                ["lxc.tty = 2", "lxc.bogus = 1", "lxc.pts = 5"], conf
            )
        assert conf.tty == 2
        assert conf.pts == 0

    def test_numero_de_ligne(self, tmp_path) -> None:
        """L'erreur porte la source et le numéro de ligne."""
        path = tmp_path / "bad.conf"
        path.write_text("# entête\n\nnot a directive\n", encoding="utf-8")

        with pytest.raises(InvalidDirectiveError) as excinfo:
            read_config(path)

        assert excinfo.value.line_number == 3
        assert excinfo.value.source == str(path)
        assert str(excinfo.value).startswith(f"{path}:3: ")

    def test_erreur_journalisee(self) -> None:
        """L'erreur est transmise à log_error avant de remonter."""
        logger = MagicMock()
        with pytest.raises(InvalidValueError):
            ConfigReader(logger=logger).read_lines(
                ["lxc.network.type = bogus"], LxcConf()
            )
        message = logger.log_error.call_args[0][0]
        assert "lxc.network.type" in message
        assert "bogus" in message

    def test_lignes_ignorees_sans_effet(self) -> None:
        """Blancs et commentaires ne modifient pas l'agrégat."""
        conf = LxcConf()
        ConfigReader().read_lines(["", "   ", "# lxc.tty = 9", "\t# x"], conf)
        assert conf == LxcConf()

    def test_memoire_epuisee(self) -> None:
        """MemoryError devient AllocationFailureError."""
        reader = ConfigReader()
        with patch.object(reader.table, "dispatch", side_effect=MemoryError):
            with pytest.raises(AllocationFailureError) as excinfo:
                reader.read_lines(["lxc.tty = 1"], LxcConf())
        assert excinfo.value.line_number == 1
        assert isinstance(excinfo.value.__cause__, MemoryError)

    def test_octets_non_utf8(self, tmp_path) -> None:
        """Une ligne non UTF-8 lève InvalidDirectiveError localisée et journalisée."""
        path = tmp_path / "latin1.conf"
        path.write_bytes(b"lxc.utsname = caf\xe9\n")
        logger = MagicMock()

        with pytest.raises(InvalidDirectiveError) as excinfo:
            read_config(path, logger=logger)

        assert excinfo.value.line_number == 1
        assert excinfo.value.source == str(path)
        assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
        logger.log_error.assert_called_once()

    def test_commentaire_non_utf8_ignore(self, tmp_path) -> None:
        """Un commentaire non UTF-8 reste ignoré."""
        path = tmp_path / "latin1.conf"
        path.write_bytes(b"# \xe9t\xe9\nlxc.tty = 3\n")

        assert read_config(path).tty == 3


class TestConfigReaderErrorHandler:
    """Tests pour le handler d'erreurs optionnel du lecteur."""

    def test_handler_recoit_l_erreur_localisee(self) -> None:
        """Le handler est appelé une fois, puis l'erreur remonte."""
        handler = MagicMock()
        reader = ConfigReader(error_handler=handler)

        with pytest.raises(UnknownDirectiveError) as excinfo:
            reader.read_lines(["lxc.tty = 1", "lxc.bogus = 1"], LxcConf())

        handler.handle.assert_called_once_with(excinfo.value)
        assert excinfo.value.line_number == 2

    def test_handler_non_appele_sans_erreur(self) -> None:
        handler = MagicMock()
        ConfigReader(error_handler=handler).read_lines(["lxc.tty = 1"], LxcConf())
        handler.handle.assert_not_called()

    def test_handler_sur_memoire_epuisee(self) -> None:
        """AllocationFailureError passe aussi par le handler."""
        handler = MagicMock()
        reader = ConfigReader(error_handler=handler)
        with patch.object(reader.table, "dispatch", side_effect=MemoryError):
            with pytest.raises(AllocationFailureError) as excinfo:
                reader.read_lines(["lxc.tty = 1"], LxcConf())
        handler.handle.assert_called_once_with(excinfo.value)

    def test_chaine_console_et_logger(self, tmp_path) -> None:
        """read_config transmet l'erreur à une chaîne console + logger."""
        path = tmp_path / "bad.conf"
        path.write_text("lxc.network.type = veth\nlxc.network.type = vlan\n",
                        encoding="utf-8")
        logger = MagicMock()
        chain = (ErrorHandlerChain()
                 .add_handler(ConsoleErrorHandler())
                 .add_handler(LoggerErrorHandler(logger)))

        with patch("builtins.print") as mock_print:
            with pytest.raises(InvalidValueError):
                read_config(path, error_handler=chain)

        logger.log_error.assert_called_once_with(
            f"InvalidValueError [{path}:2] lxc.network.type = vlan : "
            "Type de réseau invalide"
        )
        mock_print.assert_any_call(
            f"\n🛑 InvalidValueError: {path}:2: "
            "Type de réseau invalide ('lxc.network.type' = 'vlan')"
        )
