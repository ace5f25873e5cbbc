"""Fonctions de chargement des réglages du lecteur."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import BaseModel

# Type générique pour le modèle de réglages
T = TypeVar("T")


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de fichiers de réglages.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de réglages.

        Args:
            config_path: Chemin vers le fichier
            schema: Classe Pydantic BaseModel optionnelle pour
                validation. Si fourni, retourne une instance
                du modèle. Si None, retourne un dict brut.

        Returns:
            Dictionnaire brut ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
            TypeError: Si schema n'est pas un BaseModel
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de réglages depuis des fichiers TOML ou JSON.

    Le format est détecté par l'extension du fichier.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de réglages non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                raw_config = tomllib.load(f)
        elif suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                raw_config = json.load(f)
        else:
            raise ValueError(
                f"Extension non supportée: {suffix}. "
                "Utilisez .toml ou .json"
            )

        if schema is None:
            return raw_config

        return self._validate_with_schema(raw_config, schema)

    @staticmethod
    def _validate_with_schema(
        data: Dict[str, Any], schema: type
    ) -> Any:
        """Valide un dict via un modèle Pydantic.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            pydantic.ValidationError: Si les données sont invalides.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        return schema.model_validate(data)


class ConfigFileLoader(ABC, Generic[T]):
    """Classe de base abstraite pour les chargeurs de réglages typés.

    Charge un fichier (TOML ou JSON) une seule fois et expose ses
    sections aux sous-classes, qui construisent le modèle typé.

    Attributes:
        _config: Dictionnaire chargé depuis le fichier.
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Initialise le loader en chargeant le fichier.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable. Si None, utilise
                FileConfigLoader.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension du fichier n'est pas supportée.
        """
        loader = config_loader or FileConfigLoader()
        self._config: dict[str, Any] = loader.load(config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Retourne le dictionnaire brut."""
        return self._config

    def _get_section(self, section: str) -> dict[str, Any]:
        """Extrait une section du fichier.

        Raises:
            KeyError: Si la section n'existe pas dans le fichier.
        """
        if section not in self._config:
            available = list(self._config.keys())
            raise KeyError(
                f"Section '{section}' non trouvée dans le fichier. "
                f"Sections disponibles: {available}"
            )
        return self._config[section]

    @abstractmethod
    def load(self, section: str | None = None) -> T:
        """Charge et retourne le modèle typé.

        Args:
            section: Nom de la section à charger. Si None, utilise
                la section par défaut du loader.
        """
        pass
