"""
Estado del formulario y sus transiciones.

El formulario está en estado vacío (sin semilla) o poblado (con la semilla
de un registro a editar). Cada cambio de semilla reinicia valores, errores
y campos tocados desde cero.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from loguru import logger

from .fields import USER_FIELDS, get_field
from .kinds import get_handler
from .models import FieldDescriptor, FieldKind, FormMode
from .validators import validate_field


def _seed_to_dict(seed: Any) -> Optional[dict]:
    """Acepta un dict o un modelo Pydantic como semilla."""
    if seed is None:
        return None
    if hasattr(seed, "model_dump"):
        return seed.model_dump(by_alias=True)
    return dict(seed)


@dataclass
class FormState:
    """Estado del formulario: valores, errores, campos tocados y semilla."""
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS
    seed: Optional[dict] = None
    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, Optional[str]] = field(default_factory=dict)
    touched: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        self.load_seed(self.seed)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    @property
    def record_id(self) -> Any:
        """ID del registro en edición (None en modo creación)."""
        if self.seed is None:
            return None
        return self.seed.get("id")

    @property
    def mode(self) -> FormMode:
        if self.seed is not None and self.record_id is not None:
            return FormMode.EDIT
        return FormMode.CREATE

    @property
    def is_empty(self) -> bool:
        return self.seed is None

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Obtiene un descriptor por su nombre."""
        return get_field(name, self.fields)

    def get_values(self) -> dict:
        """Retorna una copia de los valores actuales."""
        return dict(self.values)

    def visible_error(self, name: str) -> Optional[str]:
        """Error a mostrar: solo si el campo fue tocado."""
        if not self.touched.get(name):
            return None
        return self.errors.get(name)

    # ------------------------------------------------------------------
    # Transiciones de semilla
    # ------------------------------------------------------------------

    def load_seed(self, seed: Any) -> None:
        """
        Inicializa el formulario desde una semilla.

        Args:
            seed: Registro a editar (dict o modelo) o None para formulario vacío
        """
        data = _seed_to_dict(seed)
        self.seed = data

        values = {}
        for fld in self.fields:
            handler = get_handler(fld.kind)
            if data is None or data.get(fld.name) is None:
                values[fld.name] = handler.empty
            else:
                values[fld.name] = handler.from_storage(data[fld.name])
        self.values = values

        # El estado de validación previo nunca sobrevive a un cambio de semilla
        self.errors = {}
        self.touched = {}

    def reset(self) -> None:
        """Vuelve al estado vacío (modo creación)."""
        self.load_seed(None)

    # ------------------------------------------------------------------
    # Eventos de entrada
    # ------------------------------------------------------------------

    def _validate(self, name: str) -> None:
        self.errors[name] = validate_field(name, self.values.get(name), self.fields)

    def on_change(self, name: str, raw_value: Any) -> Any:
        """
        Aplica un cambio de entrada a un campo.

        Solo revalida si el campo ya fue tocado.

        Returns:
            El valor almacenado tras moldear la entrada
        """
        fld = self.get_field(name)
        if fld is None:
            logger.debug(f"on_change ignorado para campo desconocido: {name}")
            return None

        handler = get_handler(fld.kind)
        self.values[name] = handler.shape_input(raw_value, self.values.get(name))

        if self.touched.get(name):
            self._validate(name)
        return self.values[name]

    def on_blur(self, name: str) -> Optional[str]:
        """Marca el campo como tocado y lo valida."""
        if self.get_field(name) is None:
            logger.debug(f"on_blur ignorado para campo desconocido: {name}")
            return None

        self.touched[name] = True
        self._validate(name)
        return self.errors[name]

    def on_date_change(self, name: str, value: Optional[date]) -> Optional[str]:
        """
        Asigna una fecha seleccionada.

        Los campos de fecha se marcan tocados y se validan de inmediato.
        """
        fld = self.get_field(name)
        if fld is None or fld.kind != FieldKind.DATE:
            logger.debug(f"on_date_change ignorado para campo: {name}")
            return None

        if isinstance(value, datetime):
            value = value.date()
        self.values[name] = value
        self.touched[name] = True
        self._validate(name)
        return self.errors[name]
