"""
初始化心情目录数据表的脚本
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
from storage import Database


async def main():
    """主函数"""
    print("开始初始化心情目录数据表...")

    database = Database.from_settings(settings)
    try:
        await database.init()
        print("✓ 数据表创建成功！")

        print("\n已创建的数据表：")
        print("  1. mood_entries - 心情目录表")
        print("  2. usage_counters - 心情访问统计表")

    except Exception as e:
        print(f"✗ 初始化失败: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1

    finally:
        # 清理数据库连接
        await database.dispose()

    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
