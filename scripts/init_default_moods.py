"""
初始化默认心情的脚本
"""
# 标准库导包
import asyncio
import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# 项目内部导包
from config import settings
from errors import ConflictError
from main import build_mood_sync_service
from storage import Database


# 默认心情配置
DEFAULT_MOODS = [
    {
        "label": "cansada",
        "phrases": ["Descansar também é parte do processo.", "Um passo de cada vez."],
        "study_tips": ["Revise resumos curtos em vez de conteúdo novo."],
        "songs": ["Weightless - Marconi Union"],
        "colors": ["azul claro"],
        "snacks": ["banana", "chá de camomila"],
        "emojis": ["😴", "🌙"],
        "quick_goals": ["Ler uma página de anotações"],
        "rest_ideas": ["Cochilo de 20 minutos"]
    },
    {
        "label": "motivada",
        "phrases": ["Aproveite essa energia!"],
        "study_tips": ["Ataque primeiro a matéria mais difícil."],
        "songs": ["Eye of the Tiger - Survivor"],
        "colors": ["laranja"],
        "snacks": ["castanhas"],
        "emojis": ["🚀", "💪"],
        "quick_goals": ["Resolver cinco exercícios"],
        "rest_ideas": ["Alongamento de 5 minutos"]
    },
    {
        "label": "ansiosa",
        "phrases": ["Respire fundo, você está se preparando."],
        "study_tips": ["Divida o conteúdo em blocos pequenos."],
        "songs": ["Clair de Lune - Debussy"],
        "colors": ["verde"],
        "snacks": ["chocolate amargo"],
        "emojis": ["🌿"],
        "quick_goals": ["Listar três tarefas do dia"],
        "rest_ideas": ["Respiração 4-7-8"]
    }
]


async def init_default_moods():
    """初始化默认心情"""
    print("开始初始化默认心情...")

    database = Database.from_settings(settings)
    try:
        await database.init()
        sync_service = build_mood_sync_service(database, strict_labels=settings.MOOD_STRICT_LABELS)

        created_count = 0
        skipped_count = 0

        for mood_data in DEFAULT_MOODS:
            try:
                entry = await sync_service.create_mood(mood_data)
            except ConflictError:
                print(f"  - 跳过已存在的心情: {mood_data['label']}")
                skipped_count += 1
                continue

            print(f"  ✓ 创建心情: {entry.label} (ID: {entry.id})")
            created_count += 1

        print(f"\n完成！创建了 {created_count} 个心情，跳过了 {skipped_count} 个已存在的心情。")
        return 0

    except Exception as e:
        print(f"✗ 初始化失败: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1

    finally:
        # 清理数据库连接
        await database.dispose()


if __name__ == "__main__":
    exit_code = asyncio.run(init_default_moods())
    sys.exit(exit_code)
