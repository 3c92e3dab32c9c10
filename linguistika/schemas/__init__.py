from .tutor import Tutor, TutorCreate, TutorUpdate
from .curso import Curso, CursoCreate, CursoUpdate
from .estudiante import Estudiante, EstudianteCreate, EstudianteUpdate
from .matricula import Matricula, MatriculaCreate, MatriculaUpdate
from .clase import Clase, ClaseCreate, ClaseUpdate
from .pago import Pago, PagoCreate, PagoUpdate
from .dashboard import Stats, ResumenTutor
